# main.py
import sys

from ride_match.app.build import build
from ride_match.app.report import format_drivers, format_outcome
from ride_match.config.sample import SAMPLE_SCENARIO
from ride_match.io.config import load_scenario
from ride_match.io.service_logging import default_json_logger


def run(path: str | None = None) -> None:
    cfg = load_scenario(path) if path else SAMPLE_SCENARIO
    # keep stdout for the report; JSON logs go to stderr
    default_json_logger(stream=sys.stderr)
    app = build(cfg)

    print(format_drivers(app.service.drivers()))
    for out in app.run():
        print(format_outcome(out))
    print(format_drivers(app.service.drivers()))


if __name__ == "__main__":
    run(sys.argv[1] if len(sys.argv) > 1 else None)
