from eightpuzzle.main import app

app(prog_name="eightpuzzle")
