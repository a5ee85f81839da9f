# helpers.py

BOUNDS = (800, 600)


class FixedRandom:
    """Stands in for np.random.Generator where a test needs exact draws."""
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def snapshot(points):
    return [(p.x, p.y, p.vx, p.vy, p.h, p.s, p.l, p.h_dir, p.s_dir, p.l_dir) for p in points]
