from long_running_app.cli.main import cli

if __name__ == "__main__":
    cli()
