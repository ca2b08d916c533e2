GREY_DIRECTION_TOKENS = {
    "left": "kGREYDirectionLeft",
    "right": "kGREYDirectionRight",
    "up": "kGREYDirectionUp",
    "down": "kGREYDirectionDown",
}


def sanitize_greyDirection(direction):
    if not isinstance(direction, str) or direction not in GREY_DIRECTION_TOKENS:
        raise ValueError(
            "GREYDirection must be one of 'left', 'right', 'up', 'down', got %r" % (direction,)
        )

    return GREY_DIRECTION_TOKENS[direction]


__all__ = ["sanitize_greyDirection"]
