ESC = "\033"
RESET = f"{ESC}[0m"
# Black background, written before each newline so the rest of the line is cleared
LINE_END = f"{ESC}[40m"

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


def fg(rgb) -> str:
    r, g, b = (int(c) for c in rgb[:3])
    return f"{ESC}[38;2;{r};{g};{b}m"


def bg(rgb) -> str:
    r, g, b = (int(c) for c in rgb[:3])
    return f"{ESC}[48;2;{r};{g};{b}m"
