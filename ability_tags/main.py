#!/usr/bin/env python3
# Path: ability_tags/main.py
"""
Ability Tags - Main Entry Point

Rule-based classification of character ability text.

Data Flow:
    INPUT:   dictionary/rules/*.yaml, character details JSON
    PROCESS: Rule compilation, matching, value extraction
    OUTPUT:  Tag reports (JSON, CSV), optional tag cache database

Usage:
    python main.py                                   # Registry summary
    python main.py --classify "Boosts ATK ..." --target captain
    python main.py --list-groups captain
    python main.py --list-rules captain --group "Damage Dealers"
    python main.py --lint                            # Check rule files
    python main.py --index                           # Tag every character

Prerequisites:
    - Configured .env file (see .env.example)
    - Character details JSON for --index
"""

import argparse
import sys
from pathlib import Path

# Ensure ability_tags root is in path
sys.path.insert(0, str(Path(__file__).parent))

from config_loader import ConfigLoader
from core.logger import setup_ipo_logging, get_input_logger
from constants import (
    TARGET_ORDER,
    SubmatcherKind,
    STATUS_OK, STATUS_FAIL, STATUS_WARN, STATUS_INFO,
    MENU_HEADER, MENU_SEPARATOR,
)
from process.tagger import TaggingCoordinator, TaggerError, Tag


def print_banner() -> None:
    """Print application banner."""
    print()
    print(MENU_HEADER)
    print("  ABILITY TAGS")
    print("  Rule-Based Ability Text Classification")
    print(MENU_HEADER)
    print()


def print_system_info(config: ConfigLoader) -> None:
    print(f"  Environment: {config.get('environment')}")
    print(f"  Rules:  {config.get('rules_dir')}")
    print(f"  Output: {config.get('output_dir')}")
    print(f"  Legacy rules: {'included' if config.get('include_legacy') else 'excluded'}")
    print()


def format_value(value) -> str:
    if value is None:
        return '-'
    if isinstance(value, bool):
        return 'yes' if value else 'no'
    return str(value)


def print_tags(tags: tuple[Tag, ...]) -> None:
    """
    Print tags with their extracted values.

    Args:
        tags: Tags from one classification
    """
    if not tags:
        print(f"\n{STATUS_INFO} No rule matched.")
        return

    print(f"\n{STATUS_OK} {len(tags)} tags:\n")
    for tag in tags:
        print(f"  [{tag.group}] {tag.rule_name}")
        for description, value in tag.values.items():
            print(f"      {description:<28} {format_value(value)}")
    print()


def print_registry_summary(coordinator: TaggingCoordinator) -> None:
    registry = coordinator.registry
    print(f"{STATUS_OK} {len(registry)} rules loaded (fingerprint {registry.fingerprint[:12]})\n")
    print(f"  {'Target':<22} {'Groups':>6} {'Rules':>6}")
    print(f"  {MENU_SEPARATOR}")
    for target in TARGET_ORDER:
        groups = registry.list_groups(target)
        rule_count = sum(len(registry.list_rules(target, group)) for group in groups)
        print(f"  {target.value:<22} {len(groups):>6} {rule_count:>6}")

    if registry.collisions:
        print(f"\n{STATUS_WARN} {len(registry.collisions)} rule name collisions:")
        for collision in registry.collisions:
            print(f"  - {collision.describe()}")
    print()


def list_groups(coordinator: TaggingCoordinator, target: str) -> int:
    groups = coordinator.list_groups(target)
    if not groups:
        print(f"\n{STATUS_INFO} No groups for target '{target}'.")
        return 0

    print(f"\n{STATUS_OK} {len(groups)} groups for {target}:\n")
    for group in groups:
        print(f"  - {group} ({len(coordinator.list_rules(target, group))} rules)")
    print()
    return 0


def list_rules(coordinator: TaggingCoordinator, target: str, group: str) -> int:
    summaries = coordinator.list_rules(target, group)
    if not summaries:
        print(f"\n{STATUS_INFO} No rules in '{group}' for target '{target}'.")
        return 0

    print(f"\n{STATUS_OK} {len(summaries)} rules in {group} ({target}):\n")
    for summary in summaries:
        print(f"  {summary.name}")
        for spec in summary.submatchers:
            if spec.kind is SubmatcherKind.SEPARATOR:
                print(f"      -- {spec.description}")
            else:
                print(f"      {spec.kind.value:<9} {spec.description}")
    print()
    return 0


def run_lint(coordinator: TaggingCoordinator, logger) -> int:
    """
    Check every rule file.

    Returns:
        Exit code (0 when clean, 1 when issues were found)
    """
    logger.info("Linting rule files")
    issues = coordinator.lint()

    if not issues:
        print(f"\n{STATUS_OK} All rules are clean.")
        return 0

    print(f"\n{STATUS_FAIL} {len(issues)} issues:\n")
    for issue in issues:
        print(f"  - {issue}")
    print()
    return 1


def run_index(
    config: ConfigLoader,
    coordinator: TaggingCoordinator,
    logger,
    character_ids: list[str] = None
) -> int:
    """
    Tag every ability in the details file and write reports.

    Args:
        config: Configuration loader
        coordinator: Tagging coordinator
        logger: Logger instance
        character_ids: Restrict to these characters

    Returns:
        Exit code (0 for success)
    """
    from loaders import AbilityTextSource
    from output import ReportWriter
    from process.indexer import AbilityIndexer

    details_path = config.get('details_path')
    if details_path is None or not Path(details_path).is_file():
        print(f"\n{STATUS_FAIL} Character details file not found: {details_path}")
        print("  Check ABILITY_TAGS_DETAILS_PATH in .env")
        return 1

    source = AbilityTextSource.from_file(details_path)
    logger.info(f"Loaded {len(source)} characters from {details_path}")

    store = None
    database_url = config.get('database_url')
    if database_url:
        from database import initialize_database, session_scope
        initialize_database(database_url)
        store = session_scope

    indexer = AbilityIndexer(coordinator, source, store=store)
    report = indexer.index(character_ids or None)

    summary = report.summary
    print(f"\n{STATUS_OK} Indexed {summary['characters']} characters:")
    print(f"  Abilities: {summary['abilities']}")
    print(f"  Tags:      {summary['tags']}")
    print(f"  Untagged:  {summary['untagged_abilities']}")
    if store is not None:
        print(f"  Cached:    {summary['cached_abilities']}")

    writer = ReportWriter(config.get('output_dir'))
    for path in writer.write(report, config.get('output_formats', ['json'])):
        print(f"  Report:    {path}")
    print()
    return 0


def initialize_system() -> tuple[ConfigLoader, TaggingCoordinator]:
    """
    Initialize configuration, logging and the rule registry.

    Returns:
        Tuple of (ConfigLoader, TaggingCoordinator)

    Raises:
        TaggerError: If the rule files are invalid
    """
    config = ConfigLoader()

    setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level='DEBUG' if config.get('debug', False) else config.get('log_level', 'INFO'),
        console_output=config.get('log_console', True)
    )

    coordinator = TaggingCoordinator(
        rules_dir=config.get('rules_dir'),
        include_legacy=config.get('include_legacy', False),
        alphabetical=config.get('alphabetical_order', True),
        strict_groups=config.get('strict_groups', True),
    )
    return config, coordinator


def main() -> int:
    """
    Main entry point for ability_tags.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description='ability_tags - Ability Text Classification',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --classify "Boosts ATK of all characters by 2x for 3 turns" --target captain
  python main.py --list-groups special
  python main.py --list-rules special --group "Survival"
  python main.py --lint
  python main.py --index --character 1 --character 2
        """
    )

    parser.add_argument(
        '--classify',
        type=str,
        metavar='TEXT',
        help='Classify one ability text (requires --target)'
    )

    parser.add_argument(
        '--target', '-t',
        type=str,
        choices=[target.value for target in TARGET_ORDER],
        help='Ability slot the text belongs to'
    )

    parser.add_argument(
        '--list-groups',
        type=str,
        metavar='TARGET',
        help='List rule groups for a target'
    )

    parser.add_argument(
        '--list-rules',
        type=str,
        metavar='TARGET',
        help='List rules of one group (requires --group)'
    )

    parser.add_argument(
        '--group', '-g',
        type=str,
        help='Rule group name'
    )

    parser.add_argument(
        '--lint',
        action='store_true',
        help='Check rule files: compile errors, examples, collisions'
    )

    parser.add_argument(
        '--index',
        action='store_true',
        help='Tag every character in the details file and write reports'
    )

    parser.add_argument(
        '--character', '-c',
        action='append',
        default=[],
        help='Restrict --index to a character id (repeatable)'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress banner and verbose output'
    )

    args = parser.parse_args()

    if args.classify is not None and args.target is None:
        parser.error('--classify requires --target')
    if args.list_rules is not None and args.group is None:
        parser.error('--list-rules requires --group')

    if not args.quiet:
        print_banner()

    try:
        config, coordinator = initialize_system()
        logger = get_input_logger('main')

        if not args.quiet:
            print_system_info(config)

        if args.classify is not None:
            print_tags(coordinator.classify(args.target, args.classify))
            return 0

        elif args.list_groups is not None:
            return list_groups(coordinator, args.list_groups)

        elif args.list_rules is not None:
            return list_rules(coordinator, args.list_rules, args.group)

        elif args.lint:
            return run_lint(coordinator, logger)

        elif args.index:
            return run_index(config, coordinator, logger, args.character)

        else:
            print_registry_summary(coordinator)
            return 0

    except TaggerError as e:
        print(f"\n{STATUS_FAIL} Rule error: {e}")
        return 1

    except ValueError as e:
        print(f"\n{STATUS_FAIL} Error: {e}")
        return 1

    except KeyboardInterrupt:
        print("\n[Interrupted]")
        return 130

    except Exception as e:
        print(f"\n{STATUS_FAIL} Unexpected error: {e}")
        import traceback
        traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
