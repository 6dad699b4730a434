import time


def countdown(seconds, sleep=time.sleep, template="{}..."):
    """
    Blocks for `seconds`, printing one tick per second.
    """
    for remaining in range(int(seconds), 0, -1):
        print(template.format(remaining))
        sleep(1)
