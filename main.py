import sys
import json
import logging
import argparse
from dataclasses import asdict
from datetime import datetime
from typing import Any

import yaml

from freelancer_scoring.config_loader import AppConfig, load_config, resolve_quality_settings
from freelancer_scoring.exceptions import ScoringException
from freelancer_scoring.matcher import rank_freelancers_for_job
from freelancer_scoring.parsing import parse_freelancers, parse_job, parse_reports
from freelancer_scoring.quality import (
    QualityReportFilter, aggregate_by_freelancer, aggregate_monthly_trend,
    evaluate_alerts, filter_reports, low_performers, summarize_errors,
    summarize_overview, time_range_cutoff, top_performers
)

logger = logging.getLogger(__name__)


def load_records(path: str) -> Any:
    """Load a JSON or YAML file of records."""
    with open(path, "r") as f:
        if path.endswith(".json"):
            return json.load(f)
        return yaml.safe_load(f)


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Not JSON serializable: {type(value).__name__}")


def emit(payload: Any) -> None:
    print(json.dumps(payload, indent=2, default=_json_default, ensure_ascii=False))


def _settings(args, config: AppConfig):
    raw = load_records(args.settings) if args.settings else config.quality
    return resolve_quality_settings(raw)


def cmd_quality(args, config: AppConfig) -> None:
    settings = _settings(args, config)
    reports = parse_reports(load_records(args.reports))

    report_filter = QualityReportFilter(
        freelancer_id=args.freelancer,
        since=time_range_cutoff(args.time_range),
    )
    reports = filter_reports(reports, report_filter)
    summaries = aggregate_by_freelancer(reports, settings)

    emit({
        "freelancers": [asdict(s) for s in summaries.values()],
        "overview": asdict(summarize_overview(reports, summaries.values())),
        "top_performers": [s.freelancer_id for s in top_performers(summaries.values(), config.rankings)],
        "low_performers": [s.freelancer_id for s in low_performers(summaries.values(), config.rankings)],
    })


def cmd_trend(args, config: AppConfig) -> None:
    settings = _settings(args, config)
    reports = parse_reports(load_records(args.reports))
    months = args.months or config.trend.month_count
    points = aggregate_monthly_trend(reports, settings, month_count=months, trend_config=config.trend)
    emit([asdict(p) for p in points])


def cmd_errors(args, config: AppConfig) -> None:
    settings = _settings(args, config)
    reports = parse_reports(load_records(args.reports))
    emit(asdict(summarize_errors(reports, settings)))


def cmd_alerts(args, config: AppConfig) -> None:
    settings = _settings(args, config)
    reports = [r for r in parse_reports(load_records(args.reports)) if r.freelancer_id == args.freelancer]
    alerts = evaluate_alerts(args.freelancer, reports, settings, config.alerts)
    emit([asdict(a) for a in alerts])


def cmd_match(args, config: AppConfig) -> None:
    freelancers = parse_freelancers(load_records(args.freelancers))
    job = parse_job(load_records(args.job))
    ranked = rank_freelancers_for_job(
        freelancers, job, config.matching, min_score=args.min_score, limit=args.limit
    )
    emit([
        {
            "freelancer_id": r.freelancer.id,
            "full_name": r.freelancer.full_name,
            "score": r.match.score,
            "details": [asdict(d) for d in r.match.details],
        }
        for r in ranked
    ])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Freelancer quality scoring and job matching")
    parser.add_argument('--config', type=str, default='config.yaml', help='Path to config.yaml')
    sub = parser.add_subparsers(dest='command', required=True)

    quality = sub.add_parser('quality', help='Per-freelancer quality summaries and rankings')
    quality.add_argument('--reports', required=True, help='JSON/YAML file of quality reports')
    quality.add_argument('--settings', help='JSON/YAML quality settings record')
    quality.add_argument('--freelancer', help='Only include this freelancer id')
    quality.add_argument('--time-range', default='all',
                         choices=['1month', '3months', '6months', '1year', 'all'])
    quality.set_defaults(func=cmd_quality)

    trend = sub.add_parser('trend', help='Monthly quality trend')
    trend.add_argument('--reports', required=True)
    trend.add_argument('--settings')
    trend.add_argument('--months', type=int, help='Number of months (default from config)')
    trend.set_defaults(func=cmd_trend)

    errors = sub.add_parser('errors', help='LQA error analysis by type and severity')
    errors.add_argument('--reports', required=True)
    errors.add_argument('--settings')
    errors.set_defaults(func=cmd_errors)

    alerts = sub.add_parser('alerts', help='Quality alerts for one freelancer')
    alerts.add_argument('--reports', required=True)
    alerts.add_argument('--settings')
    alerts.add_argument('--freelancer', required=True)
    alerts.set_defaults(func=cmd_alerts)

    match = sub.add_parser('match', help='Rank freelancers for a job')
    match.add_argument('--freelancers', required=True, help='JSON/YAML file of freelancer profiles')
    match.add_argument('--job', required=True, help='JSON/YAML job record')
    match.add_argument('--limit', type=int)
    match.add_argument('--min-score', type=int)
    match.set_defaults(func=cmd_match)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config)

    logging.basicConfig(
        level=getattr(logging, config.logging.level.upper(), logging.INFO),
        format=config.logging.format,
        stream=sys.stderr,
    )
    logger.info(f"Running '{args.command}'")

    try:
        args.func(args, config)
    except ScoringException as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
