from dataclasses import dataclass

@dataclass
class Theme:
    name: str
    bg: str
    border: str
    title: str
    header: str  # Column header row of every table
    text: str
    text_dim: str
    upload: str
    download: str


THEMES = {
    "orange": Theme(
        name="orange",
        bg="#000000",
        border="#3d2800",
        title="#ff8c00",
        header="#ffb347",
        text="#d4d4d4",
        text_dim="#707070",
        upload="#ff8c00",
        download="#4ec94e",
    ),
    "classic": Theme(
        name="classic",
        bg="default",
        border="white",
        title="white",
        header="yellow",
        text="default",
        text_dim="bright_black",
        upload="default",
        download="default",
    ),
    "monochrome": Theme(
        name="monochrome",
        bg="#000000",
        border="#777777",
        title="#ffffff",
        header="#ffffff",
        text="#cccccc",
        text_dim="#555555",
        upload="#ffffff",
        download="#ffffff",
    ),
}

def get_theme(name: str) -> Theme:
    """Returns the theme by name, defaults to 'orange' if not found."""
    return THEMES.get(name.lower(), THEMES["orange"])
