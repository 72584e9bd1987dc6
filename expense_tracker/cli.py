# expense_tracker/cli.py
import click
import yaml
from dotenv import load_dotenv
from expense_tracker.config import configure_logging, load_config
from expense_tracker.listeners import get_listener
from expense_tracker.manual import load_manual_transactions
from expense_tracker.model import TransactionStore

@click.command()
@click.option(
    '--manual-file', 'manual_file',
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help='YAML file of transactions to track'
)
@click.option(
    '--config', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to config.yaml (defaults are used when omitted)'
)
@click.option(
    '--env-file', 'env_file',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Optional .env file, e.g. setting EXPENSE_TRACKER_LOG_LEVEL'
)
@click.option(
    '--remove-category', 'remove_categories',
    multiple=True,
    help='Remove the first tracked transaction in this category (repeatable)'
)
def main(manual_file, config_path, env_file, remove_categories):
    """
    Load transactions from a YAML file into a transaction store, notifying
    every configured listener as each one is added, then apply any
    requested removals.
    """
    if env_file:
        load_dotenv(env_file)

    try:
        cfg = load_config(config_path)
        configure_logging(cfg.get('log_level'))
    except (ValueError, yaml.YAMLError) as e:
        raise click.BadParameter(str(e), param_hint='--config')

    store = TransactionStore()
    for path in cfg['listeners']:
        try:
            listener = get_listener(path, cfg)
        except (ImportError, AttributeError) as e:
            raise click.BadParameter(f"Cannot load listener {path}: {e}", param_hint='--config')
        store.register(listener)

    try:
        txs = load_manual_transactions(manual_file)
    except (ValueError, yaml.YAMLError) as e:
        raise click.BadParameter(f"{manual_file}: {e}", param_hint='--manual-file')

    for tx in txs:
        store.add_transaction(tx)

    for category in remove_categories:
        match = next((tx for tx in store.get_transactions() if tx.category == category), None)
        if match is None:
            click.echo(f"⚠️  No transaction in category: {category}", err=True)
            continue
        store.remove_transaction(match)

    click.echo(
        f"Tracked {len(store.get_transactions())} transaction(s) "
        f"({store.number_of_listeners()} listener(s))."
    )
