from landing_factory.domain.exceptions import InvariantViolation


def assert_next_build_number(previous, candidate):
    expected = (previous or 0) + 1

    if candidate != expected:
        raise InvariantViolation(
            f"Build number must be {expected}, got {candidate}"
        )
