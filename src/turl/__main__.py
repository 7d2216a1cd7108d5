from turl.cli import app

app()
