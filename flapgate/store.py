import os

from flapgate import config
from flapgate.exceptions import MissingOrMalformedRecord
from flapgate.vector import FlapState, ReferenceSet, Vector3

TAGS = {state.tag: state for state in FlapState}
# Closed first, then the two open positions in capture order.
SAVE_ORDER = (FlapState.CLOSED, FlapState.OUTSIDE, FlapState.INSIDE)


class CalibrationStore:
    """
    Reads and writes the <tag>;<x>;<y>;<z> calibration file.
    """

    def __init__(self, path=config.STATES_FILE):
        self.path = path

    def load(self):
        """
        Returns a complete ReferenceSet. A missing, unreadable or incomplete
        file raises MissingOrMalformedRecord.
        """
        try:
            with open(self.path, encoding="utf-8") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise self.error(f"cannot read calibration file: {e}") from e

        print(f"[Store] Init file has {len(lines)} lines")
        vectors = {}
        for number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            segs = line.strip().split(";")
            state = TAGS.get(segs[0])
            if state is None:
                continue
            if len(segs) < 4:
                raise self.error(f"line {number}: expected 4 fields, got {len(segs)}")
            try:
                vector = Vector3(float(segs[1]), float(segs[2]), float(segs[3]))
            except ValueError as e:
                raise self.error(f"line {number}: {e}") from e
            # a later line for the same tag wins
            vectors[state] = vector
            print(f"[Store] File-{state.name}: {vector.x};{vector.y};{vector.z};")

        missing = [state.name for state in FlapState if state not in vectors]
        if missing:
            raise self.error(f"no reference vector for state {', '.join(missing)}")
        return ReferenceSet.from_mapping(vectors)

    def save(self, refs):
        directory = os.path.dirname(self.path)
        if directory and not os.path.exists(directory):
            os.makedirs(directory)
        with open(self.path, "w", encoding="utf-8") as f:
            for state in SAVE_ORDER:
                v = refs[state]
                f.write(f"{state.tag};{v.x!r};{v.y!r};{v.z!r}\n")

    def error(self, message):
        return MissingOrMalformedRecord(
            f"{self.path}: {message} (rerun with -c to calibrate)", path=self.path
        )
