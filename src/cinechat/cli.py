"""Command-line interface for CineChat."""

import argparse
import logging
import subprocess
import sys
from pathlib import Path

from .core.config import settings
from .core.constants import DashboardConstants, FileConstants
from .core.aggregation import build_dashboard
from .core.filtering import filter_records
from .services.llm import ExtractionServiceFactory
from .services.analyzer import AnalysisSession
from .utils.data_prep import export_to_json, prepare_export, load_records_from_json

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def print_dashboard(stats):
    """Print the dashboard summary to stdout."""
    print(f"\nTotal movies: {stats.total_movies}")
    print(f"Top genre: {stats.top_genre or 'N/A'}")
    print(f"Top country: {stats.top_country or 'N/A'}")
    print(f"Positive vibes: {stats.positive_ratio:.0%}")
    
    sections = [
        ("Genres", stats.top_genres),
        ("Countries", stats.top_countries),
        ("Top recommenders", stats.top_recommenders),
        ("Decades", stats.decades),
    ]
    for title, rows in sections:
        if rows:
            print(f"\n{title}:")
            for row in rows:
                print(f"  {row.label}: {row.count}")
    
    print("\nSentiment:")
    for label, count in stats.sentiment.items():
        print(f"  {label}: {count}")
    
    if stats.most_discussed:
        print("\nMost discussed:")
        for i, movie in enumerate(stats.most_discussed, 1):
            print(f"  {i}. {movie.title} ({movie.mention_count} mentions)")


def print_movies(movies):
    for movie in movies:
        year = f" ({movie.year})" if movie.year else ""
        director = f" - {movie.director}" if movie.director else ""
        print(f"  {movie.title}{year}{director} [{', '.join(movie.genres)}]")


def cmd_analyze(args):
    """Analyze a chat log with the extraction service."""
    session = AnalysisSession(ExtractionServiceFactory.create())
    
    text = session.load_file(args.chat_file)
    print(f"Analyzing '{args.chat_file}' ({len(text)} characters)...")
    
    result = session.analyze(text, source_name=Path(args.chat_file).name)
    stats = build_dashboard(result.movies)
    print_dashboard(stats)
    
    if args.out:
        export_to_json(prepare_export(result, stats), args.out)
        print(f"\nResults exported to {args.out}")


def cmd_stats(args):
    """Recompute the dashboard for previously extracted movies."""
    movies = load_records_from_json(args.input_file)
    stats = build_dashboard(movies)
    print_dashboard(stats)
    
    if args.search or args.genre != DashboardConstants.ALL_GENRES:
        visible = filter_records(movies, args.search, args.genre)
        print(f"\nShowing {len(visible)} of {len(movies)} movies:")
        print_movies(visible)


def cmd_ui(args):
    """UI command."""
    app_path = Path(__file__).parent / "ui" / "streamlit_app.py"
    
    if not app_path.exists():
        print(f"Streamlit app not found at {app_path}")
        return
    
    print("Launching CineChat UI...")
    try:
        subprocess.run([
            sys.executable, "-m", "streamlit", "run", str(app_path)
        ], check=True)
    except subprocess.CalledProcessError as e:
        print(f"Failed to launch UI: {e}")
    except KeyboardInterrupt:
        print("\nUI stopped by user")


def build_parser():
    parser = argparse.ArgumentParser(description="CineChat - Movie Club Chat Log Analyzer")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    
    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Extract movies from a chat log')
    analyze_parser.add_argument('chat_file', help='Chat export (.txt)')
    analyze_parser.add_argument('--out', help='Output JSON file')
    
    # Stats command
    stats_parser = subparsers.add_parser('stats', help='Show dashboard statistics for saved movies')
    stats_parser.add_argument('--in', dest='input_file', required=True, help='Exported or raw movie JSON file')
    stats_parser.add_argument('--search', default='', help='Filter by title or director')
    stats_parser.add_argument('--genre', default=DashboardConstants.ALL_GENRES, help='Filter by genre')
    
    # UI command
    subparsers.add_parser('ui', help='Launch web UI')
    
    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    
    if not args.command:
        parser.print_help()
        return
    
    setup_logging()
    
    try:
        if args.command == 'analyze':
            cmd_analyze(args)
        elif args.command == 'stats':
            cmd_stats(args)
        elif args.command == 'ui':
            cmd_ui(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
    except Exception as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
