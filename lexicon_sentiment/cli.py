"""
cli.py
Command line interface for the lexicon sentiment engine
"""

import logging
import time
from pathlib import Path

import click

from .config import Config
from .engine import SentimentEngine
from .errors import SentimentEngineError
from .persistence import PersistenceManager

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


@click.group()
@click.option('--stopwords', 'stopwords_path', type=click.Path(dir_okay=False),
              default=None, help='Stopword file (one phrase per line)')
@click.option('--reviews', 'reviews_path', type=click.Path(dir_okay=False),
              default=None, help='Labeled review corpus ("<label> <text>" per line)')
@click.option('--allow-apostrophes', is_flag=True, default=False,
              help='Treat contractions such as "don\'t" as informative words')
@click.option('--progress', is_flag=True, help='Show progress while building maps')
@click.option('--verbose', '-v', is_flag=True, help='Verbose logging')
@click.pass_context
def cli(ctx, stopwords_path, reviews_path, allow_apostrophes, progress, verbose):
    """Lexicon-based review sentiment scoring"""
    _configure_logging(verbose)

    try:
        config = Config.from_env()
    except SentimentEngineError as e:
        raise click.ClickException(str(e))

    if stopwords_path:
        config.stopwords_path = click.format_filename(stopwords_path)
    if reviews_path:
        config.reviews_path = click.format_filename(reviews_path)
    if allow_apostrophes:
        config.allow_apostrophes = True

    ctx.obj = {'config': config, 'progress': progress}


def _engine(ctx, top_n=None) -> SentimentEngine:
    config = ctx.obj['config']
    if top_n is not None:
        config.top_n = top_n
    return SentimentEngine.from_config(config, show_progress=ctx.obj['progress'])


# =============================================================================
# score
# =============================================================================

@cli.command()
@click.argument('review', nargs=-1)
@click.option('--input', '-i', 'input_path', type=click.Path(exists=True, dir_okay=False),
              default=None, help='File with one review per line')
@click.option('--top-n', '-n', type=click.IntRange(min=0), default=None,
              help='Number of top corpus words to report')
@click.option('--export', '-e', default=None, help='CSV file for the results')
@click.pass_context
def score(ctx, review, input_path, top_n, export):
    """Score one or more reviews"""
    start_time = time.time()

    if input_path:
        with open(input_path, 'r', encoding='utf-8') as f:
            reviews = [line.rstrip('\n') for line in f if line.strip()]
    elif review:
        reviews = [' '.join(review)]
    else:
        raise click.UsageError('Provide a REVIEW argument or --input')

    try:
        engine = _engine(ctx, top_n)
        results = [engine.score(text) for text in reviews]
    except SentimentEngineError as e:
        raise click.ClickException(str(e))

    for result in results:
        click.echo(result.annotated_text)
        click.echo()

    if export:
        export_path = Path(export)
        manager = PersistenceManager(export_path.parent)
        path = manager.save_score_results(results, export_path.name)
        click.echo(f"Saved {len(results)} result(s) to {path}")

    logger.info("Scored %d review(s) in %.2fs", len(results), time.time() - start_time)


# =============================================================================
# append
# =============================================================================

@cli.command()
@click.argument('text', nargs=-1, required=True)
@click.option('--label', '-l', type=int, required=True, help='Sentiment label (0-4)')
@click.pass_context
def append(ctx, text, label):
    """Append a labeled review to the corpus"""
    try:
        engine = _engine(ctx)
        engine.append(' '.join(text), label)
    except SentimentEngineError as e:
        raise click.ClickException(str(e))

    click.echo(f"Appended review with label {label}; corpus now has {len(engine.lexicon.reviews)} lines")


# =============================================================================
# top-words
# =============================================================================

@cli.command('top-words')
@click.option('--top-n', '-n', type=int, default=Config.DEFAULT_TOP_N,
              help='Number of words')
@click.pass_context
def top_words(ctx, top_n):
    """Most frequent informative words of the corpus"""
    try:
        engine = _engine(ctx)
        words = engine.ranked_words(top_n)
    except SentimentEngineError as e:
        raise click.ClickException(str(e))

    for rank, word in enumerate(words, 1):
        click.echo(f"{rank:2d}. {word:20s} {engine.frequency_map[word]}")


# =============================================================================
# stats
# =============================================================================

@cli.command()
@click.pass_context
def stats(ctx):
    """Corpus statistics"""
    try:
        statistics = _engine(ctx).statistics()
    except SentimentEngineError as e:
        raise click.ClickException(str(e))

    for key, value in statistics.items():
        click.echo(f"{key}: {value}")


# =============================================================================
# export
# =============================================================================

@cli.command()
@click.option('--output-dir', '-o', default=None, help='Directory for the CSV files')
@click.pass_context
def export(ctx, output_dir):
    """Export the sentiment and frequency maps as CSV"""
    try:
        engine = _engine(ctx)
        manager = PersistenceManager(output_dir or ctx.obj['config'].export_dir)
        sentiment_path = manager.save_sentiment_map(engine.sentiment_map)
        frequency_path = manager.save_frequency_map(engine.frequency_map)
    except SentimentEngineError as e:
        raise click.ClickException(str(e))

    click.echo(f"Sentiment map: {sentiment_path}")
    click.echo(f"Frequency map: {frequency_path}")


def main():
    cli()
