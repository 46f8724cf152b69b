from perfectfour.cli import app

app(prog_name="perfectfour")
