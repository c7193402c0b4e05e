from azioncli.cli.main import app

app()
