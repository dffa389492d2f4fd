import argparse
import json
import logging
import sys
from typing import Dict, List

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from TermRetriever.build_inverted_index import InvertedIndex
from TermRetriever.config import load_config
from TermRetriever.preprocessing.document import Document
from TermRetriever.tfidf_search.tfidf_search import TFIDFScorer

logger = logging.getLogger(__name__)

console = Console()

SAMPLE_DOCUMENTS = [
    Document(id=1, content="The quick brown fox jumps over the lazy dog."),
    Document(id=2, content="The lazy dog is sleeping."),
    Document(id=3, content="The fox is quick and clever."),
    Document(id=4, content="Dogs are loyal animals."),
    Document(id=5, content="Foxes are wild animals."),
]

DEFAULT_SEARCHES = ["the", "fox", "dog"]

DEFAULT_SCORES = [("fox", 1), ("lazy", 2), ("quick", 3), ("wild", 5)]


class TermRetriever:
    """
    Unified interface over the term index.
    Combines the inverted index and the TF-IDF scorer.
    """
    def __init__(self, config=None):
        self.config = config or load_config()
        self.documents: List[Document] = []
        self.index = InvertedIndex(config=self.config)
        self.scorer = TFIDFScorer(self.index)
        self.documents_loaded = False

    def load_documents(self, documents_path: str) -> bool:
        """
        Load documents from a JSON file holding a list of {"id", "content"} records.

        Args:
            documents_path: Path to the JSON file with documents

        Returns:
            bool: True if loading was successful, False otherwise
        """
        try:
            console.print(f"Loading documents from: [cyan]{documents_path}[/cyan]")
            with open(documents_path, 'r', encoding='utf-8') as f:
                records = json.load(f)

            if not isinstance(records, list):
                console.print("[bold red]Error loading documents:[/bold red] expected a JSON list of documents")
                return False

            self.use_documents([Document.from_dict(record) for record in records])
            console.print(f"[green]Successfully loaded [bold]{len(self.documents)}[/bold] documents[/green]")
            return True
        except (OSError, ValueError) as e:
            console.print(f"[bold red]Error loading documents:[/bold red] {e}")
            return False

    def use_documents(self, documents: List[Document]):
        self.documents = list(documents)
        self.documents_loaded = True

    def build_index(self) -> Dict[str, List[int]]:
        """Build the inverted index from the loaded documents."""
        if not self.documents_loaded:
            logger.warning("No documents loaded, building an empty index")
        return self.index.build(self.documents)

    def search(self, term: str) -> List[int]:
        return self.index.search(term)

    def score(self, term: str, doc_id: int) -> float:
        return self.scorer.score(term, doc_id)


def display_index(index: Dict[str, List[int]]):
    """Display the whole inverted index as a table"""
    table = Table(
        box=box.SIMPLE_HEAVY,
        show_header=True,
        header_style="bold magenta",
        title=f"[bold]Inverted Index ({len(index)} terms)[/bold]",
        title_style="yellow"
    )
    table.add_column("Term", style="cyan")
    table.add_column("Document IDs", style="green")

    for term, doc_ids in index.items():
        table.add_row(term, str(doc_ids))

    console.print(table)


def display_search_results(retriever: TermRetriever, terms: List[str]):
    """Display the posting list of each searched term"""
    table = Table(box=box.SIMPLE_HEAVY, show_header=True, header_style="bold magenta",
                  title="[bold]Search results[/bold]", title_style="yellow")
    table.add_column("Query", style="cyan")
    table.add_column("Document IDs", style="green")

    for term in terms:
        doc_ids = retriever.search(term)
        table.add_row(escape(term), str(doc_ids) if doc_ids else "[dim]no match[/dim]")

    console.print(table)


def display_scores(retriever: TermRetriever, pairs):
    """Display TF-IDF scores for (term, document ID) pairs"""
    table = Table(box=box.SIMPLE_HEAVY, show_header=True, header_style="bold magenta",
                  title="[bold]TF-IDF scores[/bold]", title_style="yellow")
    table.add_column("Term", style="cyan")
    table.add_column("Document", justify="right")
    table.add_column("TF-IDF", justify="right", style="green")

    for term, doc_id in pairs:
        table.add_row(escape(term), str(doc_id), f"{retriever.score(term, doc_id):.4f}")

    console.print(table)


def setup_logging(level="INFO"):
    """
    Route logging through the rich console.

    Args:
        level: Level name such as "INFO" or "DEBUG"; unknown names fall back to INFO
    """
    level_name = str(level).upper()
    invalid = not isinstance(logging.getLevelName(level_name), int)

    logging.basicConfig(
        level=logging.INFO if invalid else level_name,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True
    )

    if invalid:
        logger.warning("Unknown logging level %r in config, using INFO", level)


def parse_score_pair(values):
    term, doc_id = values
    try:
        return term, int(doc_id)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Document ID must be an integer, got {doc_id!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='TermRetriever - Inverted index and TF-IDF term scoring'
    )
    parser.add_argument('--documents', help='Path to documents JSON file (defaults to the sample corpus)')
    parser.add_argument('--config', help='Path to a JSON configuration file')
    parser.add_argument('--search', action='append', metavar='TERM',
                        help='Term to look up (repeatable)')
    parser.add_argument('--score', action='append', nargs=2, metavar=('TERM', 'DOC_ID'),
                        help='Compute TF-IDF of TERM in document DOC_ID (repeatable)')
    parser.add_argument('--no-index', action='store_true',
                        help='Do not print the full inverted index')
    parser.add_argument('--verbose', action='store_true',
                        help='Show debug logging')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config)
    setup_logging("DEBUG" if args.verbose else config.get("logging", {}).get("level", "INFO"))

    try:
        score_pairs = [parse_score_pair(pair) for pair in args.score] if args.score else DEFAULT_SCORES
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    console.print(Panel(
        "[bold blue]TermRetriever[/bold blue] [yellow]Term Index[/yellow]",
        border_style="blue",
        subtitle="Inverted index with TF-IDF scoring",
        width=80
    ))

    retriever = TermRetriever(config=config)

    if args.documents:
        if not retriever.load_documents(args.documents):
            sys.exit(1)
    else:
        console.print("[dim]No documents file provided. Using sample documents...[/dim]")
        retriever.use_documents(SAMPLE_DOCUMENTS)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True
    ) as progress:
        task = progress.add_task("Building index...", total=None)
        index = retriever.build_index()
        progress.update(task, completed=True)

    if not args.no_index:
        display_index(index)

    display_search_results(retriever, args.search or DEFAULT_SEARCHES)
    display_scores(retriever, score_pairs)


if __name__ == "__main__":
    main()
