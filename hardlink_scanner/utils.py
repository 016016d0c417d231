"""Hilfsfunktionen – Formatierung etc."""


def format_size(size_bytes: int) -> str:
    """Konvertiert Bytes in die größte passende Binär-Einheit (z.B. 1.2G, 3.8M).

    Größte Einheit ist G, auch Terabyte-Werte werden in G angezeigt (3072.0G).
    """
    if size_bytes < 0:
        raise ValueError(f"Größe darf nicht negativ sein: {size_bytes}")
    if size_bytes < 1024:
        return f"{size_bytes}B"

    size = float(size_bytes)
    for unit in ("K", "M", "G"):
        size /= 1024
        if size < 1024 or unit == "G":
            return f"{size:.1f}{unit}"
