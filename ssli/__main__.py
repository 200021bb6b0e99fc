from ssli.cli import entry_point

entry_point()
