import argparse
import logging
import os
import sys
from typing import List
from colorama import Fore, Style, init

from .config import load_config
from .countries import MAJOR_MARKETS, SUPPORTED_COUNTRIES, sorted_country_codes
from .errors import AppSearchError
from .manager import AppSearchManager
from .sorting import SortOption, sort_apps
from .store.base import AppRecord

init(autoreset=True)


def setup_logging(level: str):
    numeric = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stdout
    )


def print_config_summary(config):
    """Show the storefront and aggregation settings in use."""
    print(f"{Fore.CYAN}{Style.BRIGHT}\n[CONFIG SUMMARY]{Style.RESET_ALL}")
    print(
        f"  • Country              : {config.country_code}\n"
        f"  • Lookup fallbacks     : {', '.join(config.fallback_countries)}\n"
        f"  • Rating markets       : {len(config.markets)}\n"
        f"  • Global ratings       : {config.enable_global_ratings}\n"
        f"  • Cache TTL (secs)     : {config.cache_ttl_seconds:g}\n"
        f"  • Request timeout      : {config.request_timeout:g}s\n"
    )


def print_app(app: AppRecord):
    stars = "★" * app.star_rating + "☆" * (5 - app.star_rating)
    print(f"{Fore.YELLOW}• {app.track_name}{Style.RESET_ALL}  {Fore.GREEN}{app.display_price}{Style.RESET_ALL}")
    print(f"    Developer : {app.artist_name}")
    print(f"    Category  : {app.display_genre}   Age: {app.display_age_rating}   Size: {app.display_file_size}")
    if app.has_rating:
        print(f"    Rating    : {stars} {app.display_rating:.2f} ({app.display_rating_count} reviews)")
    else:
        print(f"    Rating    : {Fore.BLUE}no ratings yet{Style.RESET_ALL}")
    if app.short_description:
        print(f"    About     : {app.short_description}")
    print(f"    Store Link: {app.track_view_url or 'N/A'}\n")


def print_apps(apps: List[AppRecord], title: str):
    print(f"\n{Fore.CYAN}{Style.BRIGHT}→ {title}{Style.RESET_ALL} ({len(apps)})")
    if not apps:
        print(f"  {Fore.BLUE}No apps to show{Style.RESET_ALL}\n")
        return
    for app in apps:
        print_app(app)


def cmd_developer(manager, args):
    apps = manager.fetch_developer_apps(
        args.app_id,
        exclude_app_ids=args.exclude,
        include_current_app=args.include_self,
        max_apps=args.max if args.max is not None else manager.config.max_apps,
    )
    print_apps(sort_apps(apps, args.sort), f"More apps by the developer of {args.app_id}")


def cmd_apps(manager, args):
    print_apps(manager.fetch_specific_apps(args.ids), "Selected apps")


def cmd_hybrid(manager, args):
    hybrid = manager.fetch_hybrid_apps(args.app_id, args.featured, max_additional=args.max_additional)
    print_apps(hybrid.featured, "Featured apps")
    print_apps(hybrid.additional, f"More from {hybrid.developer_name or 'this developer'}")


def cmd_insights(manager, args):
    insights = manager.get_promotion_insights(args.ids)
    top = insights.top_performing_app
    print(f"\n{Fore.CYAN}{Style.BRIGHT}[PROMOTION INSIGHTS]{Style.RESET_ALL}")
    print(f"  • Total reviews        : {insights.total_download_potential}")
    print(f"  • Average rating       : {insights.average_rating:.2f}")
    print(f"  • Top performing app   : {top.track_name if top else 'none'}")
    for category, count in sorted(insights.category_breakdown.items()):
        print(f"  • {category:<21}: {count}")
    order = ", ".join(str(i) for i in insights.recommended_promotion_order) or "none"
    print(f"  • Recommended order    : {order}\n")


def cmd_ratings(manager, args):
    print(manager.debug_global_ratings(args.app_id))


def cmd_search(manager, args):
    print_apps(manager.search(args.term, limit=args.limit), f"Search results for '{args.term}'")


def cmd_countries(manager, args):
    codes = MAJOR_MARKETS if args.major else sorted_country_codes()
    for code in codes:
        marker = f"{Fore.GREEN}*{Style.RESET_ALL}" if code in MAJOR_MARKETS else " "
        print(f" {marker} {code}  {SUPPORTED_COUNTRIES[code]}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="crosspromo: cross-promote your other App Store apps")
    parser.add_argument("--config", "-c", default=None, help="Path to config.yml")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--quiet", action="store_true", help="Suppress the config summary")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("developer", help="List other apps by the same developer")
    p.add_argument("app_id", type=int)
    p.add_argument("--exclude", type=int, nargs="*", default=[], help="App ids to leave out")
    p.add_argument("--include-self", action="store_true", help="Keep the given app in the list")
    p.add_argument("--max", type=int, default=None, help="Maximum number of apps")
    p.add_argument("--sort", choices=[o.value for o in SortOption], default=SortOption.ALPHABETICAL.value)
    p.set_defaults(func=cmd_developer)

    p = sub.add_parser("apps", help="Fetch specific apps by id")
    p.add_argument("ids", type=int, nargs="+")
    p.set_defaults(func=cmd_apps)

    p = sub.add_parser("hybrid", help="Featured apps followed by other developer apps")
    p.add_argument("app_id", type=int)
    p.add_argument("--featured", type=int, nargs="+", required=True)
    p.add_argument("--max-additional", type=int, default=3)
    p.set_defaults(func=cmd_hybrid)

    p = sub.add_parser("insights", help="Promotion insights for a set of apps")
    p.add_argument("ids", type=int, nargs="+")
    p.set_defaults(func=cmd_insights)

    p = sub.add_parser("ratings", help="Per-market rating breakdown for one app")
    p.add_argument("app_id", type=int)
    p.set_defaults(func=cmd_ratings)

    p = sub.add_parser("search", help="Keyword search in the configured storefront")
    p.add_argument("term")
    p.add_argument("--limit", type=int, default=25)
    p.set_defaults(func=cmd_search)

    p = sub.add_parser("countries", help="List supported storefronts")
    p.add_argument("--major", action="store_true", help="Only the rating markets")
    p.set_defaults(func=cmd_countries)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    config_path = args.config
    if config_path is None and os.path.exists("config.yml"):
        config_path = "config.yml"
    config = load_config(config_path)
    setup_logging("DEBUG" if args.verbose else config.logging.get("level", "INFO"))
    if not args.quiet:
        print_config_summary(config)

    manager = AppSearchManager(config)
    try:
        args.func(manager, args)
    except AppSearchError as e:
        print(f"{Fore.RED}[ERROR]{Style.RESET_ALL} {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
