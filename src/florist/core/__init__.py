__all__ = [
    "alphabet",
    "codon",
    "genetic_code",
    "moltype",
    "population",
    "profile",
    "sequence",
]
