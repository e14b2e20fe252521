"""
Example: Using the Statistics convenience wrapper.

This example shows how to use the high-level Statistics class
for raw data, automatically binned data and class intervals.
"""

from pathlib import Path

from freqstat import EmptyDatasetError, InvalidTokenError, StatisticsError
from freqstat.data_input import add_interval, make_interval
from freqstat.descriptive import Statistics


def print_results(stats: Statistics) -> None:
    results = stats.results.rounded(stats.config.decimals)
    mode = ", ".join(str(m) for m in results.mode) if results.mode else "No mode"
    print(f"Mean: {results.mean}")
    print(f"Median: {results.median}")
    print(f"Mode: {mode}")
    print(f"Variance: {results.variance}")
    print(f"Standard deviation: {results.standard_deviation}")


def example_ungrouped():
    """Raw observations typed into a text box."""

    stats = Statistics(text="12, 15, 18, 22, 25, 30, 32, 35, 38, 42, 45, 48")
    print_results(stats)

    print("\nx | x^2")
    for row in stats.analysis.rows:
        print(f"{row.value:g} | {row.x2:.2f}")


def example_binned():
    """Raw observations grouped with Sturges' Rule."""

    stats = Statistics(text="12 15 18 22 25 30 32 35 38 42 45 48", data_type="grouped")
    processed = stats.analysis.processed

    print(f"Range: {processed.range}, classes: {processed.class_count}, width: {processed.class_width}")
    print("\nClass | f | cf | x | fx | x^2 | fx^2")
    for row in processed.frequency_table:
        print(f"{row.label} | {row.frequency} | {row.cumulative_frequency} | {row.midpoint:.2f} | "
              f"{row.fx:.2f} | {row.x2:.2f} | {row.fx2:.2f}")
    print(f"Totals | {processed.total_frequency} | | | {processed.total_fx:.2f} | | {processed.total_fx2:.2f}\n")
    print_results(stats)


def example_grouped():
    """Class intervals entered one at a time."""

    intervals = []
    for lower, upper, frequency in [("0", "10", "4"), ("10", "30", "10"), ("30", "35", "6")]:
        intervals = add_interval(intervals, make_interval(lower, upper, frequency))

    try:
        add_interval(intervals, make_interval("5", "15", "1"))
    except StatisticsError as e:
        print(f"Rejected: {e}")

    stats = Statistics(grouped_data=intervals)
    print_results(stats)


def example_with_config():
    """Example using Statistics with custom configuration."""

    config_file = Path(__file__).parent / "config.yaml"
    stats = Statistics(text="2 4 4 4 5 5 7 9", config_file=config_file)
    print(f"Variance ({stats.config.variance_method}): {stats.get_value('variance')}")

    for text in ["", "1 2 three"]:
        try:
            Statistics(text=text)
        except (EmptyDatasetError, InvalidTokenError) as e:
            print(f"Input {text!r}: {e}")


if __name__ == '__main__':
    print("=== Example 1: Ungrouped Data ===\n")
    example_ungrouped()

    print("\n\n=== Example 2: Automatic Binning ===\n")
    example_binned()

    print("\n\n=== Example 3: Class Intervals ===\n")
    example_grouped()

    print("\n\n=== Example 4: With Custom Config ===\n")
    example_with_config()
