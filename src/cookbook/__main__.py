from cookbook.cli import cli

cli()
