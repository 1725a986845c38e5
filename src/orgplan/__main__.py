from orgplan.cli import app

app(prog_name="orgplan")
