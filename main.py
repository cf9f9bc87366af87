"""
Solar data analytics entry point.
Loads a data snapshot and logs the requested analysis.
"""

import os
import sys
import argparse
import logging

from dotenv import load_dotenv

from solarscope import SolarData
from solarscope.classification import AnomalySeverity
from solarscope.loader import DataLoadError
from solarscope.logger import config_logger

load_dotenv(verbose=True, dotenv_path=".env")

DEFAULT_DATA_FILE = "data/sample.json"
MODES = ["summary", "monthly", "weekly", "anomalies", "weather", "correlation"]


def get_args(argv=None):
    """
    Parse command line arguments for the solar data analytics.
        :return: Parsed arguments.
        :rtype: argparse.Namespace
    """
    parser = argparse.ArgumentParser(description="Solar Data Analytics")
    parser.add_argument(
        "--data",
        type=str,
        default=os.getenv("SOLARSCOPE_DATA_FILE", DEFAULT_DATA_FILE),
        help="Path to the solar data JSON snapshot",
    )
    parser.add_argument(
        "--year", type=int, help="Year to analyze (default: latest available year)"
    )
    parser.add_argument(
        "--all-years", action="store_true", help="Analyze all years together"
    )
    parser.add_argument("--mode", choices=MODES, default="summary", help="Analysis mode")
    parser.add_argument(
        "--severity",
        type=str,
        default="low",
        help="Minimum anomaly severity: none, low, medium, high",
    )
    parser.add_argument(
        "--count", type=int, default=10, help="Number of days to list"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    if args.all_years and args.year is not None:
        raise ValueError("Cannot specify both --year and --all-years")

    if args.count < 0:
        raise ValueError("--count must not be negative")

    args.severity = AnomalySeverity.parse(args.severity)

    return args


def log_summary(data: SolarData, year):
    """Log energy totals and production statistics."""
    totals = data.yearly_totals(year) if year is not None else data.totals()
    summary = data.production_summary(year)

    logging.info(
        "Production %.2f kWh, consumption %.2f kWh, injection %.2f kWh",
        totals.production,
        totals.consumption,
        totals.injection,
    )
    logging.info(
        "%d days, %.2f kWh/day on average (std dev %.2f), %d energy positive days",
        summary.days,
        summary.average_production,
        summary.production_std_dev,
        summary.energy_positive_days,
    )
    if summary.best_day is not None:
        logging.info(
            "Best day %d (%.2f kWh), worst day %d (%.2f kWh)",
            summary.best_day.day,
            summary.best_day.production,
            summary.worst_day.day,
            summary.worst_day.production,
        )


def log_monthly(data: SolarData, year):
    """Log the 30-day month buckets."""
    for month, stats in data.monthly_statistics(year).items():
        logging.info(
            "Month %2d: %3d days, %.2f kWh produced, %.2f kWh consumed, "
            "%.1f °C, %.1f%% anomalous",
            month,
            stats.days_with_data,
            stats.total_production,
            stats.total_consumption,
            stats.average_temperature,
            stats.anomaly_rate,
        )


def log_weekly(data: SolarData, year):
    """Log the 7-day week buckets."""
    for week, stats in data.weekly_statistics(year).items():
        logging.info(
            "Week %2d: %d days, %.2f kWh produced (%.2f kWh/day)",
            week,
            stats.days_with_data,
            stats.total_production,
            stats.average_production,
        )


def log_anomalies(data: SolarData, year, severity, count):
    """Log the severity breakdown and the most anomalous days."""
    for level, days in data.severity_breakdown(year).items():
        logging.info("%s: %d days", level.name.capitalize(), days)

    for record in data.anomalous_days(year, severity)[:count]:
        logging.info(
            "Day %d (%s): score %.2f, %s, flagged upstream: %s",
            record.day,
            record.year,
            record.total_anomaly_score,
            record.severity.name.capitalize(),
            record.anomaly.has_anomaly,
        )

    directions = data.anomaly_directions(year, severity)
    logging.info(
        "Production high/low: %d/%d, consumption high/low: %d/%d",
        directions.high_production,
        directions.low_production,
        directions.high_consumption,
        directions.low_consumption,
    )


def log_weather(data: SolarData, year, count):
    """Log production per weather condition and the worst weather days."""
    for aggregate in data.condition_breakdown(year):
        logging.info(
            "%s: %d days, %.2f kWh/day on average",
            aggregate.condition.value,
            aggregate.days,
            aggregate.average_production,
        )

    for record in data.worst_weather_days(year, count):
        logging.info(
            "Day %d: %.1f h sunshine, %.1f mm precipitation, %.2f kWh",
            record.day,
            record.weather.sunshine_hours,
            record.weather.precipitation,
            record.production,
        )


def log_correlation(data: SolarData, year):
    """Log the weather/production correlation coefficients."""
    result = data.weather_correlation(year)
    for factor, coefficient in result.coefficients().items():
        logging.info(
            "%s: %.3f (%s)",
            factor.label,
            coefficient,
            result.strength(factor).value,
        )
    logging.info("Strongest correlation: %s", result.strongest_factor().label)


def main(argv=None) -> int:
    """Main function to run the solar data analytics."""

    args = get_args(argv)
    config_logger(debug=args.debug)

    try:
        data = SolarData.load(args.data)
    except DataLoadError as e:
        logging.error("%s", e)
        return 1

    if args.all_years:
        year = None
    else:
        year = args.year if args.year is not None else data.latest_year
        if year is None:
            logging.warning("No data available in %s", args.data)
            return 1
        if year not in data.available_years:
            logging.warning("No data for year %d", year)

    logging.info("Analyzing %s", "all years" if year is None else year)

    match args.mode:
        case "summary":
            log_summary(data, year)
        case "monthly":
            log_monthly(data, year)
        case "weekly":
            log_weekly(data, year)
        case "anomalies":
            log_anomalies(data, year, args.severity, args.count)
        case "weather":
            log_weather(data, year, args.count)
        case "correlation":
            log_correlation(data, year)

    return 0


if __name__ == "__main__":
    sys.exit(main())
