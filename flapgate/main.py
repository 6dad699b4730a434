import argparse
import sys

from flapgate import __version__, config
from flapgate.calibration import Calibrator
from flapgate.exceptions import FlapGateError
from flapgate.monitor import MonitorLoop
from flapgate.notify import MastodonNotifier
from flapgate.sampler import VectorSampler
from flapgate.store import CalibrationStore

BANNER = r"""
 |\---/|
 | o_o |
  \_v_ /
"""


def build_parser():
    parser = argparse.ArgumentParser(prog="flapgate", description="Cat flap watcher.")
    parser.add_argument("-d", "-debug", dest="debug", action="store_true",
                        help="Print all measuring points")
    parser.add_argument("-c", "-calibration", dest="calibration", action="store_true",
                        help="Redo calibration of sensor")
    return parser


def print_banner():
    print(BANNER)
    print(f"FlapGate V{__version__}")
    print("^-d -debug Print all measuring points")
    print("^-c -calibration Redo calibration of sensor")
    print("+~" * 18)


def main(argv=None):
    args = build_parser().parse_args(argv)
    print_banner()

    try:
        notifier = MastodonNotifier.from_config()

        # board probes the platform on import, so only load it on the device
        from flapgate.hardware.accelerometer import Accelerometer
        sampler = VectorSampler(Accelerometer())
        store = CalibrationStore(config.STATES_FILE)

        if args.calibration:
            refs = Calibrator(sampler, store).run()
        else:
            refs = store.load()

        MonitorLoop(sampler, refs, notifier, trace=args.debug).run()
    except FlapGateError as e:
        print(f"[Error] {e}")
        return 1
    except KeyboardInterrupt:
        print("\nStopping...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
