from flapgate.vector import FlapState


def classify(measurement, refs):
    """
    Returns the flap state whose reference vector is nearest.
    Two rounds: closed against inside, then the winner against outside.
    The earlier candidate keeps ties, so an exact tie resolves to closed
    before inside and to either of those before outside.
    """
    d_closed = measurement.distance_to(refs.closed)
    d_inside = measurement.distance_to(refs.inside)
    d_outside = measurement.distance_to(refs.outside)

    if d_closed <= d_inside:
        return FlapState.CLOSED if d_closed <= d_outside else FlapState.OUTSIDE
    return FlapState.INSIDE if d_inside <= d_outside else FlapState.OUTSIDE
