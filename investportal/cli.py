"""Management commands available through `flask`."""

import click
from flask.cli import with_appcontext

from investportal.core.orphans import prune_orphans


@click.command('prune-uploads')
@click.option('--dry-run', is_flag=True, help='Only list the files that would be deleted.')
@with_appcontext
def prune_uploads(dry_run):
    """Delete the uploaded files that no record references."""
    try:
        pruned = prune_orphans(dry_run=dry_run)
    except NotImplementedError as err:
        raise click.ClickException(f'Pruning is only possible with local storage. ({err})')

    for reference in pruned:
        click.echo(reference)
    verb = 'Would delete' if dry_run else 'Deleted'
    click.echo(f'{verb} {len(pruned)} file(s).')
