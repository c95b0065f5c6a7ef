"""
Analisa Sentimen - Review Sentiment Dashboard

CLI entry point for analysing sentiment CSVs and managing button links.
"""

import argparse
import logging
import os
import sys
from typing import List

from sentimen.context import AppContext, User
from sentimen.dashboard import SentimentDashboard
from sentimen.errors import SentimenError
from sentimen.models.criteria import ASCENDING, DESCENDING, ViewCriteria
from sentimen.models.link import ButtonLink
from sentimen.models.row import ROW_FIELDS, SENTIMENT_LABELS
from sentimen.pipeline.charts import render_charts
from sentimen.pipeline.export import write_csv
from sentimen.registry.link_registry import LinkRegistry, share_url
from sentimen.storage.content_store import GitHubContentStore
from sentimen.storage.upload import UploadPipeline
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Analisa Sentimen - Review Sentiment Dashboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Summarize a CSV and show the first page
  python main.py analyze ulasan.csv

  # Positive electronics reviews mentioning "bagus", sorted by rating
  python main.py analyze ulasan.csv --kategori Elektronik \\
                 --sentiment Positive --search bagus \\
                 --sort-key rating --sort-order desc

  # Export the filtered view and save charts
  python main.py analyze ulasan.csv --export out/filtered.csv --charts out/charts.png

  # Create, resolve and search button links
  python main.py links create "Download=https://example.com/file"
  python main.py links resolve Ab3dE6gH9k
  python main.py links search download
        """
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # analyze
    analyze = subparsers.add_parser("analyze", help="Analyze a sentiment CSV")
    analyze.add_argument("csv", help="Path to CSV with Ulasan, Rating, Kategori, Nama Produk, label")
    analyze.add_argument("--search", default="", help="Case-insensitive text to find in Ulasan")
    analyze.add_argument("--kategori", default="", help="Exact category to keep")
    analyze.add_argument("--produk", default="", help="Exact product name to keep")
    analyze.add_argument("--sentiment", default="", choices=[""] + list(SENTIMENT_LABELS),
                         help="Sentiment to keep")
    analyze.add_argument("--sort-key", choices=ROW_FIELDS, help="Column to sort by")
    analyze.add_argument("--sort-order", default=ASCENDING, choices=[ASCENDING, DESCENDING],
                         help="Sort direction (default: asc)")
    analyze.add_argument("--page", type=int, default=1, help="Page to display (default: 1)")
    analyze.add_argument("--export", help="Write the filtered view to this CSV path")
    analyze.add_argument("--charts", help="Save sentiment and rating charts to this PNG path")
    analyze.add_argument("--remote", action="store_true",
                         help="Round-trip the file through the content store before parsing")
    analyze.add_argument("--user", help="Username (required with --remote)")
    analyze.add_argument("--name", default="", help="Display name for --user")

    # links
    links = subparsers.add_parser("links", help="Manage button links")
    link_commands = links.add_subparsers(dest="link_command", required=True)

    create = link_commands.add_parser("create", help="Create a link from NAME=URL buttons")
    create.add_argument("buttons", nargs="+", metavar="NAME=URL")
    create.add_argument("--host", default="localhost", help="Host used for the share URL")

    resolve = link_commands.add_parser("resolve", help="Show the buttons for a key")
    resolve.add_argument("key")

    search = link_commands.add_parser("search", help="Find buttons by name")
    search.add_argument("term")

    return parser


def parse_buttons(pairs: List[str]) -> List[ButtonLink]:
    """Turn NAME=URL arguments into ButtonLink forms."""
    buttons = []
    for pair in pairs:
        name, sep, url = pair.partition("=")
        if not sep:
            raise argparse.ArgumentTypeError(f"Expected NAME=URL, got {pair!r}")
        buttons.append(ButtonLink(button_name=name.strip(), url=url.strip()))
    return buttons


def run_analyze(args, context: AppContext) -> int:
    logger = logging.getLogger(__name__)

    with open(args.csv, "r", encoding="utf-8") as f:
        content = f.read()
    filename = os.path.basename(args.csv)

    dashboard = SentimentDashboard()
    if args.remote:
        if args.user:
            context.login(User(username=args.user, nama=args.name or args.user))
        context.require_user()
        pipeline = UploadPipeline(GitHubContentStore(context))
        dashboard.load(pipeline.run(filename, content))
    elif not dashboard.ingest(filename, content):
        print(dashboard.status[1])
        return 1

    dashboard.set_criteria(ViewCriteria(
        search=args.search,
        kategori=args.kategori,
        nama_produk=args.produk,
        sentiment=args.sentiment,
        sort_key=args.sort_key,
        sort_order=args.sort_order
    ))
    view = dashboard.set_page(args.page)
    summary = view.aggregates

    print("=" * 60)
    print(f"File: {filename}")
    print(f"Total Reviews: {summary.total} (of {len(dashboard.dataset)})")
    print(f"Average Rating: {summary.average_rating}")
    print(
        f"Sentiment Breakdown: {summary.sentiment_counts['Positive']} Positive, "
        f"{summary.sentiment_counts['Negative']} Negative"
    )
    print("Rating Distribution: " + ", ".join(
        f"{level}: {count}" for level, count in summary.rating_counts.items()
    ))
    print("=" * 60)

    if view.filtered:
        print(view.to_frame().to_string(index=False))
        strip = " ".join("..." if p is None else (f"[{p}]" if p == view.page else str(p))
                         for p in view.page_strip)
        print(f"\nPage {view.page}/{view.total_pages}: {strip}")
    else:
        print("No reviews match the current filters.")

    if args.export:
        path = write_csv(view.filtered, args.export)
        print(f"Exported: {path}")

    if args.charts:
        path = render_charts(view.charts, args.charts)
        print(f"Charts: {path}")

    logger.info("Analysis completed successfully")
    return 0


def run_links(args, context: AppContext) -> int:
    registry = LinkRegistry(GitHubContentStore(context))

    if args.link_command == "create":
        link_id = registry.create(parse_buttons(args.buttons))
        print(f"Link ID: {link_id}")
        print(f"Share URL: {share_url(args.host, link_id)}")
        return 0

    if args.link_command == "resolve":
        entry = registry.resolve(args.key)
        if entry is None:
            print(f"No link found for {args.key}")
            return 1
        for button in entry.buttons:
            print(f"{button.button_name}: {button.url}")
        return 0

    entries = registry.search(args.term)
    if not entries:
        print("No buttons found matching your search.")
        return 1
    for entry in entries:
        print(f"[{entry.id}]")
        for button in entry.buttons:
            print(f"  {button.button_name}: {button.url}")
    return 0


def main():
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    context = AppContext()

    try:
        if args.command == "analyze":
            code = run_analyze(args, context)
        else:
            code = run_links(args, context)
        sys.exit(code)

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        print("\n⚠️  Interrupted")
        sys.exit(1)

    except (SentimenError, OSError, argparse.ArgumentTypeError) as e:
        logger.error(f"Command failed: {e}", exc_info=True)
        print(f"\n❌ {e}")
        print(f"Check {settings.LOG_FILE} for details")
        sys.exit(1)

    finally:
        context.logout()


if __name__ == "__main__":
    main()
