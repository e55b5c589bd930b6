# parked_domains/report/json_report.py

"""
Writing the JSON result of a ParkedDomains scan to a file.
"""
from pathlib import Path

from parked_domains.aggregator import ScanReport


def render_json(report: ScanReport, output_path: Path | str) -> Path:
    """
    Saves the matches of *report* as a JSON array at the given path.

    :param report: ScanReport of a finished scan
    :param output_path: path of the JSON file
    :return: Path of the saved file

    The file holds exactly the text printed to stdout, without the trailing
    newline::

        render_json(report, "out/parked.json")
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open("w", encoding="utf-8") as f:
        f.write(report.json())

    return output
