from svgdump.cli import cli

cli()
