"""Wrapping paper and ribbon for presents."""


def calculate_square_feet(length: int, width: int, height: int) -> int:
    """Paper needed: the surface area plus the smallest side."""
    sides = (length * width, width * height, height * length)
    return 2 * sum(sides) + min(sides)


def calculate_feet(length: int, width: int, height: int) -> int:
    """Ribbon needed: the smallest perimeter plus the volume."""
    a, b, c = sorted((length, width, height))
    return 2 * a + 2 * b + a * b * c


def _dimensions(data: str):
    for line in data.splitlines():
        length, width, height = (int(n) for n in line.split("x")[:3])
        yield length, width, height


def get_total_square_feet(data: str) -> int:
    return sum(calculate_square_feet(*dims) for dims in _dimensions(data))


def get_total_feet(data: str) -> int:
    return sum(calculate_feet(*dims) for dims in _dimensions(data))


def solve_a(text: str) -> str:
    return str(get_total_square_feet(text))


def solve_b(text: str) -> str:
    return str(get_total_feet(text))