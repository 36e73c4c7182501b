"""Canonical records written to an empty catalog on first run."""

from penguin_explorer.application.schemas import PenguinCreate

DEFAULT_PENGUINS: tuple[PenguinCreate, ...] = (
    PenguinCreate(
        species="Emperor Penguin",
        habitat="Antarctica",
        height="100-130 cm",
        diet="Fish, squid, and krill",
        fun_fact=(
            "Emperor penguins can dive deeper than any other bird, "
            "reaching depths of over 500 meters!"
        ),
        image_url="🐧",
        is_favorite=False,
    ),
    PenguinCreate(
        species="King Penguin",
        habitat="Subantarctic islands",
        height="85-95 cm",
        diet="Fish and squid",
        fun_fact=(
            "King penguins have the longest breeding cycle of any penguin "
            "species, taking 14-16 months!"
        ),
        image_url="👑🐧",
        is_favorite=False,
    ),
    PenguinCreate(
        species="Adelie Penguin",
        habitat="Antarctica",
        height="60-70 cm",
        diet="Krill and fish",
        fun_fact=(
            "Adelie penguins build nests out of stones and can steal stones "
            "from their neighbors!"
        ),
        image_url="🐧",
        is_favorite=False,
    ),
)
