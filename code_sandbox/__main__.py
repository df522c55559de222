from code_sandbox.main import run

run()
