from gender_condition.cli import app

app()
