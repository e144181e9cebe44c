#!/usr/bin/env python3
"""
DoMotive Command Line Interface

Main entry point for the `domotive` command. Every command prints a JSON
result with a success flag.

Usage:
    domotive mood log 6 --tags "tired, hopeful"
    domotive suggest                       # uses today's latest mood
    domotive suggest --mood 8 --time-of-day morning --count 3
    domotive accept <suggestion-id>
    domotive templates list --category Exercise
    domotive tasks list --status pending
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Optional

from domotive.app import Services, build_services
from domotive.config_models import load_and_validate
from domotive.exceptions import DoMotiveError
from domotive.logging_config import setup_logging
from domotive.models import TimeOfDay


def _ok(data: Any, **extra: Any) -> dict[str, Any]:
    return {"success": True, "data": data, **extra}


# =============================================================================
# Commands
# =============================================================================

def cmd_suggest(args, services: Services) -> dict[str, Any]:
    """Handle suggest subcommand."""
    mood_value = args.mood
    if mood_value is None:
        latest = services.moods.latest_today()
        if latest is None:
            return {
                "success": False,
                "error": "No mood logged today - pass --mood or run 'domotive mood log'",
            }
        mood_value = latest.value

    time_of_day = TimeOfDay(args.time_of_day) if args.time_of_day else None
    suggestions = services.engine.offer_suggestions(
        mood_value,
        time_of_day=time_of_day,
        max_suggestions=args.count,
        record=False if args.no_record else None,
    )
    return _ok(
        [s.to_dict() for s in suggestions],
        mood_value=mood_value,
        time_of_day=(time_of_day or services.engine.current_time_of_day()).value,
    )


def cmd_accept(args, services: Services) -> dict[str, Any]:
    task = services.engine.accept_suggestion(args.suggestion_id)
    return _ok(task.to_dict(), message=f"Task created with ID {task.id}")


def cmd_templates(args, services: Services) -> dict[str, Any]:
    catalog = services.catalog
    if args.templates_command == "list":
        templates = catalog.list_by_category(args.category) if args.category else catalog.list_all()
        return _ok([t.to_dict() for t in templates])
    if args.templates_command == "add":
        template = catalog.create(
            title=args.title,
            description=args.description,
            category=args.category,
            difficulty=args.difficulty,
            estimated_duration=args.duration,
            mood_range=args.mood_range,
            default_labels=args.labels,
        )
        return _ok(template.to_dict(), message=f"Template created with ID {template.id}")
    if args.templates_command == "delete":
        if not catalog.delete(args.template_id):
            return {"success": False, "error": f"Template {args.template_id} not found"}
        return _ok({"deleted": args.template_id})
    if args.templates_command == "seed":
        return _ok({"seeded": catalog.seed_built_ins()})
    return {"success": False, "error": "Choose a templates command"}


def cmd_mood(args, services: Services) -> dict[str, Any]:
    moods = services.moods
    if args.mood_command == "log":
        entry = moods.log_mood(args.value, tags=args.tags)
        return _ok(entry.to_dict(), label=moods.label_for(entry.value), emoji=moods.emoji_for(entry.value))
    if args.mood_command == "today":
        entry = moods.latest_today()
        if entry is None:
            return _ok(None, message="No mood logged today")
        return _ok(entry.to_dict(), label=moods.label_for(entry.value), emoji=moods.emoji_for(entry.value))
    if args.mood_command == "list":
        return _ok([e.to_dict() for e in moods.list_entries(args.limit)])
    if args.mood_command == "label":
        custom = moods.save_custom_label(args.value, args.label, args.emoji)
        return _ok(custom.to_dict())
    return {"success": False, "error": "Choose a mood command"}


def cmd_journal(args, services: Services) -> dict[str, Any]:
    if args.journal_command == "add":
        return _ok(services.journal.add_entry(args.text).to_dict())
    if args.journal_command == "list":
        return _ok([e.to_dict() for e in services.journal.list_entries()])
    return {"success": False, "error": "Choose a journal command"}


def cmd_tasks(args, services: Services) -> dict[str, Any]:
    tasks = services.tasks
    if args.tasks_command == "list":
        listing = {"pending": tasks.pending, "completed": tasks.completed, "all": tasks.all}
        return _ok([t.to_dict() for t in listing[args.status]()])
    if args.tasks_command == "add":
        task = tasks.add_manual(
            args.title,
            description=args.description,
            category=args.category,
            difficulty=args.difficulty,
            estimated_duration=args.duration,
            labels=args.labels,
        )
        return _ok(task.to_dict(), message=f"Task created with ID {task.id}")
    if args.tasks_command == "toggle":
        return _ok(tasks.toggle_completion(args.task_id).to_dict())
    if args.tasks_command == "delete":
        if not tasks.delete(args.task_id):
            return {"success": False, "error": f"Task {args.task_id} not found"}
        return _ok({"deleted": args.task_id})
    return {"success": False, "error": "Choose a tasks command"}


def cmd_labels(args, services: Services) -> dict[str, Any]:
    labels = services.labels
    if args.search:
        found = labels.search(args.search)
    elif args.category:
        found = labels.by_category(args.category)
    else:
        found = labels.all()
    return _ok([lb.to_dict() for lb in found], categories=labels.categories())


def cmd_version(args, services: Optional[Services] = None) -> dict[str, Any]:
    """Show version information."""
    try:
        from importlib.metadata import version

        v = version("domotive")
    except Exception:
        v = "0.1.0 (development)"
    return _ok({"version": v})


# =============================================================================
# Parser
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="domotive",
        description="DoMotive - mood log, journal and mood-aware task suggestions",
    )
    parser.add_argument("--version", "-V", action="store_true", help="Show version and exit")
    parser.add_argument("--db", help="SQLite database path (overrides config)")
    parser.add_argument("--config", help="Path to a domotive.yaml config file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # suggest
    suggest = subparsers.add_parser("suggest", help="Suggest tasks for a mood")
    suggest.add_argument("--mood", type=int, help="Mood value 1-10 (default: today's latest)")
    suggest.add_argument(
        "--time-of-day", choices=[t.value for t in TimeOfDay], help="Default: from the clock"
    )
    suggest.add_argument("--count", type=int, help="Maximum number of suggestions")
    suggest.add_argument(
        "--no-record", action="store_true", help="Do not write suggestion history"
    )
    suggest.set_defaults(func=cmd_suggest)

    # accept
    accept = subparsers.add_parser("accept", help="Turn a suggestion into a task")
    accept.add_argument("suggestion_id")
    accept.set_defaults(func=cmd_accept)

    # templates
    templates = subparsers.add_parser("templates", help="Task template catalog")
    templates_sub = templates.add_subparsers(dest="templates_command", help="Template commands")
    t_list = templates_sub.add_parser("list", help="List templates")
    t_list.add_argument("--category")
    t_add = templates_sub.add_parser("add", help="Create a template")
    t_add.add_argument("--title", required=True)
    t_add.add_argument("--description", default="")
    t_add.add_argument("--category")
    t_add.add_argument("--difficulty", type=int, default=1)
    t_add.add_argument("--duration", type=int, default=15, help="Minutes")
    t_add.add_argument("--mood-range", help='e.g. "4-7" or "1-3, 8-10"')
    t_add.add_argument("--labels", default="")
    t_delete = templates_sub.add_parser("delete", help="Delete a user template")
    t_delete.add_argument("template_id")
    templates_sub.add_parser("seed", help="Insert built-in templates if missing")
    templates.set_defaults(func=cmd_templates)

    # mood
    mood = subparsers.add_parser("mood", help="Mood log")
    mood_sub = mood.add_subparsers(dest="mood_command", help="Mood commands")
    m_log = mood_sub.add_parser("log", help="Log a mood value")
    m_log.add_argument("value", type=int)
    m_log.add_argument("--tags", default="")
    mood_sub.add_parser("today", help="Latest mood logged today")
    m_list = mood_sub.add_parser("list", help="Mood history, newest first")
    m_list.add_argument("--limit", type=int)
    m_label = mood_sub.add_parser("label", help="Set a custom word and emoji for a mood value")
    m_label.add_argument("value", type=int)
    m_label.add_argument("label")
    m_label.add_argument("emoji")
    mood.set_defaults(func=cmd_mood)

    # journal
    journal = subparsers.add_parser("journal", help="Journal entries")
    journal_sub = journal.add_subparsers(dest="journal_command", help="Journal commands")
    j_add = journal_sub.add_parser("add", help="Write an entry")
    j_add.add_argument("text")
    journal_sub.add_parser("list", help="List entries, newest first")
    journal.set_defaults(func=cmd_journal)

    # tasks
    tasks = subparsers.add_parser("tasks", help="To-do list")
    tasks_sub = tasks.add_subparsers(dest="tasks_command", help="Task commands")
    tk_list = tasks_sub.add_parser("list", help="List tasks by due date")
    tk_list.add_argument("--status", choices=["pending", "completed", "all"], default="pending")
    tk_add = tasks_sub.add_parser("add", help="Add a task")
    tk_add.add_argument("title")
    tk_add.add_argument("--description", default="")
    tk_add.add_argument("--category")
    tk_add.add_argument("--difficulty", type=int, default=1)
    tk_add.add_argument("--duration", type=int, default=15, help="Minutes")
    tk_add.add_argument("--labels", default="")
    tk_toggle = tasks_sub.add_parser("toggle", help="Flip a task's completion")
    tk_toggle.add_argument("task_id")
    tk_delete = tasks_sub.add_parser("delete", help="Delete a task")
    tk_delete.add_argument("task_id")
    tasks.set_defaults(func=cmd_tasks)

    # labels
    labels = subparsers.add_parser("labels", help="Task labels")
    labels.add_argument("--category")
    labels.add_argument("--search")
    labels.set_defaults(func=cmd_labels)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        result = cmd_version(args)
        print(json.dumps(result, indent=2))
        return 0

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    config = load_and_validate(args.config)
    setup_logging(config.logging)

    try:
        services = build_services(config, db_path=args.db)
        result = args.func(args, services)
    except DoMotiveError as e:
        result = {"success": False, "error": e.message, "details": e.details}
    except ValueError as e:
        # unknown enum values and the like
        result = {"success": False, "error": str(e)}

    print(json.dumps(result, indent=2, default=str, ensure_ascii=False))
    return 0 if result.get("success") else 1


if __name__ == "__main__":
    sys.exit(main())
