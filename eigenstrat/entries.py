from dataclasses import dataclass
from enum import Enum
from eigenstrat.utils import FormatError
from typing import Tuple

REF_ALLELES = "ACTGN"
ALT_ALLELES = "ACTGX"

@dataclass(frozen=True, order=True)
class Chrom:
    name: str

    def __str__(self):
        return self.name

class Sex(Enum):
    Male = "M"
    Female = "F"
    Unknown = "U"

class GenotypeCall(Enum):
    # member values are the digits used in genotype files
    HomRef = "2"
    Het = "1"
    HomAlt = "0"
    Missing = "9"

# One call per individual, in the order of the individual file
GenoLine = Tuple[GenotypeCall, ...]

@dataclass(frozen=True)
class SnpEntry:
    chrom: Chrom
    pos: int
    refAllele: str
    altAllele: str

    def __post_init__(self):
        if not isinstance(self.chrom, Chrom):
            object.__setattr__(self, "chrom", Chrom(str(self.chrom)))
        if isinstance(self.pos, bool) or not isinstance(self.pos, int) or self.pos < 0:
            raise FormatError(f"SNP position must be a non-negative integer, got {self.pos!r}")
        if not isinstance(self.refAllele, str) or len(self.refAllele) != 1 or self.refAllele not in REF_ALLELES:
            raise FormatError(f"reference allele must be one of {REF_ALLELES}, got {self.refAllele!r}")
        if not isinstance(self.altAllele, str) or len(self.altAllele) != 1 or self.altAllele not in ALT_ALLELES:
            raise FormatError(f"alternative allele must be one of {ALT_ALLELES}, got {self.altAllele!r}")

@dataclass(frozen=True)
class IndEntry:
    name: str
    sex: Sex
    population: str

def genoLineToStr(genoLine: GenoLine) -> str:
    return "".join(call.value for call in genoLine)

def genoLineFromStr(digits: str) -> GenoLine:
    return tuple(GenotypeCall(d) for d in digits)
