__all__ = ["fasta", "inputs", "record"]
