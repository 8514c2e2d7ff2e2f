"""Problems on DNA, RNA and protein strings."""

from __future__ import annotations

from florist.core.moltype import DNA, PROTEIN, RNA
from florist.core.profile import make_consensus
from florist.core.sequence import (
    DnaSequence,
    NoValidProteinError,
    overlap_edges,
)
from florist.parse.fasta import parse_fasta
from florist.parse.inputs import InputError, parse_seq_list
from florist.problems import Problem


def _fasta_seqs(text: str, moltype=DNA) -> list[tuple[str, DnaSequence]]:
    return [(label, moltype.make_seq(seq)) for label, seq in parse_fasta(text)]


def _exactly(records: list, num: int, what: str = "sequences") -> list:
    if len(records) != num:
        raise InputError(f"expected {num} {what}, got {len(records)}")
    return records


def _lines(values) -> str:
    return "\n".join(str(v) for v in values)


class _DnaInput(Problem):
    def parse(self, text: str):
        return DNA.make_seq(text)


class CountingDnaNucleotides(_DnaInput):
    """Counts of A, C, G and T in a DNA string."""

    rosalind_id = "dna"
    name = "counting-dna-nucleotides"

    def solve(self, data):
        return data.counts()

    def format(self, result) -> str:
        return " ".join(str(n) for n in result.values())


class TranscribingDnaIntoRna(_DnaInput):
    """Transcribes a DNA string into RNA."""

    rosalind_id = "rna"
    name = "transcribing-dna-into-rna"

    def solve(self, data):
        return data.to_rna()


class ComplementingAStrandOfDna(_DnaInput):
    """Reverse complement of a DNA string."""

    rosalind_id = "revc"
    name = "complementing-a-strand-of-dna"

    def solve(self, data):
        return data.reverse_complement()


class ComputingGcContent(Problem):
    """The FASTA record with the highest GC content."""

    rosalind_id = "gc"
    name = "computing-gc-content"

    def parse(self, text: str):
        return _fasta_seqs(text)

    def solve(self, data):
        # the first record wins a tie
        label, seq = max(data, key=lambda record: record[1].gc_content())
        return label, seq.gc_content() * 100

    def format(self, result) -> str:
        label, percent = result
        return f"{label}\n{percent:.6f}"


class CountingPointMutations(Problem):
    """Hamming distance between two DNA strings."""

    rosalind_id = "hamm"
    name = "counting-point-mutations"

    def parse(self, text: str):
        return _exactly(parse_seq_list(text, DNA), 2)

    def solve(self, data):
        first, second = data
        return first.hamming_distance(second)


class FindingAMotifInDna(Problem):
    """1-based locations of a motif in a DNA string."""

    rosalind_id = "subs"
    name = "finding-a-motif-in-dna"

    def parse(self, text: str):
        return _exactly(parse_seq_list(text, DNA), 2)

    def solve(self, data):
        seq, motif = data
        return [i + 1 for i in seq.motif_locations(motif)]

    def format(self, result) -> str:
        return " ".join(map(str, result))


class TranslatingRnaIntoProtein(Problem):
    """Translates an mRNA string into protein."""

    rosalind_id = "prot"
    name = "translating-rna-into-protein"

    def parse(self, text: str):
        return RNA.make_seq(text)

    def solve(self, data):
        return data.to_protein()


class ConsensusAndProfile(Problem):
    """Consensus string and profile of equal length DNA strings."""

    rosalind_id = "cons"
    name = "consensus-and-profile"

    def parse(self, text: str):
        return [seq for _, seq in _fasta_seqs(text)]

    def solve(self, data):
        return make_consensus(data)


class OpenReadingFrames(Problem):
    """Distinct proteins from the open reading frames of both strands."""

    rosalind_id = "orf"
    name = "open-reading-frames"

    def parse(self, text: str):
        return _exactly(_fasta_seqs(text), 1)[0][1]

    def solve(self, data):
        proteins = set()
        for strand in (data, data.reverse_complement()):
            for frame in strand.open_frames():
                try:
                    proteins.add(frame.to_protein())
                except NoValidProteinError:
                    continue
        return sorted(proteins)

    def format(self, result) -> str:
        return _lines(result)


class RnaSplicing(Problem):
    """Protein encoded by a gene after removal of its introns."""

    rosalind_id = "splc"
    name = "rna-splicing"

    def parse(self, text: str):
        seqs = [seq for _, seq in _fasta_seqs(text)]
        return seqs[0], seqs[1:]

    def solve(self, data):
        gene, introns = data
        return gene.splice(introns).to_protein()


class LocatingRestrictionSites(Problem):
    """Position and length of reverse palindromes of length 4 to 12."""

    rosalind_id = "revp"
    name = "locating-restriction-sites"

    def parse(self, text: str):
        return _exactly(_fasta_seqs(text), 1)[0][1]

    def solve(self, data):
        return data.reverse_palindromes(min_length=4, max_length=12)

    def format(self, result) -> str:
        return _lines(f"{position} {length}" for position, length in result)


class TransitionsAndTransversions(Problem):
    """Transition to transversion ratio of two DNA strings."""

    rosalind_id = "tran"
    name = "transitions-and-transversions"

    def parse(self, text: str):
        return [seq for _, seq in _exactly(_fasta_seqs(text), 2)]

    def solve(self, data):
        first, second = data
        return first.transition_transversion_ratio(second)

    def format(self, result) -> str:
        return str(round(result, 11))


class OverlapGraphs(Problem):
    """Adjacency list of the overlap graph with k = 3."""

    rosalind_id = "grph"
    name = "overlap-graphs"

    def parse(self, text: str):
        return _fasta_seqs(text)

    def solve(self, data):
        return overlap_edges(data, k=3)

    def format(self, result) -> str:
        return _lines(f"{source} {target}" for source, target in result)


class CalculatingProteinMass(Problem):
    """Monoisotopic mass of a protein string."""

    rosalind_id = "prtm"
    name = "calculating-protein-mass"

    def parse(self, text: str):
        return PROTEIN.make_seq(text)

    def solve(self, data):
        return data.monoisotopic_mass()

    def format(self, result) -> str:
        return f"{result:.3f}"


class InferringMrnaFromProtein(Problem):
    """Number of mRNA strings encoding a protein, modulo 1,000,000."""

    rosalind_id = "mrna"
    name = "inferring-mrna-from-protein"

    def parse(self, text: str):
        return PROTEIN.make_seq(text)

    def solve(self, data):
        return data.num_mrna_sources(modulo=1_000_000)
