import pathlib
import sys

from setuptools import find_packages, setup

# Check Python version, no point installing if unsupported version inplace
min_version = (3, 10)
if sys.version_info < min_version:
    py_version = ".".join(str(n) for n in sys.version_info)
    msg = (
        f"Python-{'.'.join(map(str, min_version))} or greater is required, "
        f"Python-{py_version} used."
    )
    raise RuntimeError(msg)


def _get_version() -> str:
    version_path = pathlib.Path(__file__).parent / "src" / "florist" / "_version.py"
    namespace = {}
    exec(version_path.read_text(), namespace)
    return namespace["__version__"]


short_description = "Rosalind bioinformatics problems on typed, validated sequences"

readme_path = pathlib.Path(__file__).parent / "README.md"

long_description = readme_path.read_text()


PACKAGE_DIR = "src"

PROBLEMS = [
    "dna=florist.problems.strings:CountingDnaNucleotides",
    "rna=florist.problems.strings:TranscribingDnaIntoRna",
    "revc=florist.problems.strings:ComplementingAStrandOfDna",
    "gc=florist.problems.strings:ComputingGcContent",
    "hamm=florist.problems.strings:CountingPointMutations",
    "subs=florist.problems.strings:FindingAMotifInDna",
    "prot=florist.problems.strings:TranslatingRnaIntoProtein",
    "cons=florist.problems.strings:ConsensusAndProfile",
    "orf=florist.problems.strings:OpenReadingFrames",
    "splc=florist.problems.strings:RnaSplicing",
    "revp=florist.problems.strings:LocatingRestrictionSites",
    "tran=florist.problems.strings:TransitionsAndTransversions",
    "grph=florist.problems.strings:OverlapGraphs",
    "prtm=florist.problems.strings:CalculatingProteinMass",
    "mrna=florist.problems.strings:InferringMrnaFromProtein",
    "iprb=florist.problems.heredity:MendelsFirstLaw",
    "iev=florist.problems.heredity:CalculatingExpectedOffspring",
    "lia=florist.problems.heredity:IndependentAlleles",
    "fib=florist.problems.heredity:RabbitsAndRecurrenceRelations",
    "fibd=florist.problems.heredity:MortalFibonacciRabbits",
]

setup(
    name="florist",
    version=_get_version(),
    description=short_description,
    long_description=long_description,
    long_description_content_type="text/markdown",
    platforms=["any"],
    license="BSD-3",
    keywords=[
        "biology",
        "bioinformatics",
        "rosalind",
        "genetic code",
    ],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: BSD License",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    packages=find_packages(where="src"),
    package_dir={"": PACKAGE_DIR},
    python_requires=">=3.10",
    install_requires=[
        "chardet",
        "click",
        "numpy",
        "scitrack",
        "stevedore",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
        ],
        "dev": [
            "black",
            "isort",
            "nox",
            "pytest",
            "pytest-cov",
        ],
    },
    entry_points={
        "console_scripts": ["florist=florist.cli:main"],
        "florist.problem": PROBLEMS,
    },
)
