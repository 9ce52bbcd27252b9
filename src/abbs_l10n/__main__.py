from .cli import app

app(prog_name="abbs-l10n-sync")
