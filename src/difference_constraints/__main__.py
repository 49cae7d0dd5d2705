from difference_constraints.main import cli

cli()
