from webex_summarizer.cli import cli

cli()
