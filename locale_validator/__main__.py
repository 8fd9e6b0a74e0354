from locale_validator.main import run

run()
