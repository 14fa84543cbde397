from site_bootstrap.main import run

if __name__ == "__main__":
    run()
