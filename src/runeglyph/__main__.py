from runeglyph.cli import cli

cli()
