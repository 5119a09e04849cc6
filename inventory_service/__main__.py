# inventory_service/__main__.py

from inventory_service.cli import cli

cli()
