from commitlog.cli import run

run()
