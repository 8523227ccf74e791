"""Command line arguments and the entry point of the rhit command."""