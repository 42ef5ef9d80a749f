from evscore.cli import app

app(prog_name="evs")
