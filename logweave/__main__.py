"""
Entry point for python -m logweave
"""

import click
from logweave.cli import interleave

@click.group()
@click.version_option(version='1.0.0')
def cli():
    """logweave - Multi-node Log Timeline Merger"""
    pass

cli.add_command(interleave)

if __name__ == '__main__':
    cli()
