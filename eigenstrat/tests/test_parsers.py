import unittest
from eigenstrat.entries import Chrom, GenotypeCall, IndEntry, Sex, SnpEntry, genoLineToStr
from eigenstrat.parsers import consumeLines, parseGenoLine, parseIndLine, parseSnpLine
from eigenstrat.utils import FormatError

class TestIndParser(unittest.TestCase):
    def test_parse_ind_line(self):
        self.assertEqual(parseIndLine("John\tM\tEUR\n"), IndEntry(name="John", sex=Sex.Male, population="EUR"))

    def test_leading_and_mixed_whitespace(self):
        self.assertEqual(parseIndLine("  I1 \t F   POP_A\r\n"), IndEntry(name="I1", sex=Sex.Female, population="POP_A"))

    def test_last_line_without_newline(self):
        self.assertEqual(parseIndLine("I2\tU\tPOP"), IndEntry(name="I2", sex=Sex.Unknown, population="POP"))

    def test_sex_codes(self):
        for code, sex in [("M", Sex.Male), ("F", Sex.Female), ("U", Sex.Unknown)]:
            self.assertEqual(parseIndLine(f"I\t{code}\tP\n").sex, sex)
        for code in ["X", "m", "f", "u", "1", "?"]:
            with self.assertRaises(FormatError, msg=f"sex {code} should not be accepted"):
                parseIndLine(f"I\t{code}\tP\n")

    def test_sex_must_be_single_char(self):
        with self.assertRaises(FormatError):
            parseIndLine("I\tMale\tP\n")

    def test_missing_population(self):
        with self.assertRaises(FormatError) as cm:
            parseIndLine("I\tM\n", 7)
        self.assertIn("line 7", str(cm.exception))

    def test_trailing_field(self):
        with self.assertRaises(FormatError):
            parseIndLine("I\tM\tP\textra\n")

class TestSnpParser(unittest.TestCase):
    def test_parse_snp_line(self):
        e = parseSnpLine("rs1\t1\t0.0\t100\tA\tG\n")
        self.assertEqual(e, SnpEntry(chrom=Chrom("1"), pos=100, refAllele="A", altAllele="G"))

    def test_id_and_genetic_pos_unchecked(self):
        e = parseSnpLine(" weird;id  chrX  n/a  0  N  X\n")
        self.assertEqual(e, SnpEntry(chrom=Chrom("chrX"), pos=0, refAllele="N", altAllele="X"))

    def test_bad_alleles(self):
        for line in ["rs1\t1\t0\t100\tX\tG\n", "rs1\t1\t0\t100\tA\tN\n", "rs1\t1\t0\t100\ta\tG\n", "rs1\t1\t0\t100\tAC\tG\n"]:
            with self.assertRaises(FormatError, msg=f"{line!r} should not parse"):
                parseSnpLine(line)

    def test_bad_position(self):
        for pos in ["-5", "1.5", "abc"]:
            with self.assertRaises(FormatError):
                parseSnpLine(f"rs1\t1\t0\t{pos}\tA\tG\n")

    def test_too_few_columns(self):
        with self.assertRaises(FormatError) as cm:
            parseSnpLine("rs1\t1\t0\t100\tA\t\n")
        self.assertIn("alternative allele", str(cm.exception))

class TestGenoParser(unittest.TestCase):
    def test_digit_mapping(self):
        self.assertEqual(parseGenoLine("2\n"), (GenotypeCall.HomRef,))
        self.assertEqual(parseGenoLine("0129\n"), (GenotypeCall.HomAlt, GenotypeCall.Het, GenotypeCall.HomRef, GenotypeCall.Missing))

    def test_digit_roundtrip(self):
        for digits in ["0", "9999", "2102910", "1" * 500]:
            self.assertEqual(genoLineToStr(parseGenoLine(digits + "\n")), digits)

    def test_bad_characters(self):
        for line in ["0123\n", "01 2\n", "012 \n", "\n", "01a\n"]:
            with self.assertRaises(FormatError, msg=f"{line!r} should not parse"):
                parseGenoLine(line)

    def test_error_names_column(self):
        with self.assertRaises(FormatError) as cm:
            parseGenoLine("0125\n", 3)
        self.assertIn("line 3, column 4", str(cm.exception))

class TestConsumeLines(unittest.TestCase):
    def test_skip_blank(self):
        lines = ["I1\tM\tP\n", "\n", "   \n", "I2\tF\tP\n"]
        self.assertEqual([e.name for e in consumeLines(parseIndLine, lines, skipBlank=True)], ["I1", "I2"])

    def test_line_numbers(self):
        lines = ["I1\tM\tP\n", "\n", "I2\tQ\tP\n"]
        with self.assertRaises(FormatError) as cm:
            list(consumeLines(parseIndLine, lines, skipBlank=True))
        self.assertIn("line 3", str(cm.exception))

class TestEntries(unittest.TestCase):
    def test_snp_entry_checks(self):
        with self.assertRaises(FormatError):
            SnpEntry(chrom=Chrom("1"), pos=-1, refAllele="A", altAllele="G")
        with self.assertRaises(FormatError):
            SnpEntry(chrom=Chrom("1"), pos=1, refAllele="X", altAllele="G")
        with self.assertRaises(FormatError):
            SnpEntry(chrom=Chrom("1"), pos=1, refAllele="A", altAllele="N")

    def test_chrom_ordering(self):
        self.assertLess(Chrom("1"), Chrom("2"))
        self.assertEqual(str(Chrom("chr1")), "chr1")
        self.assertEqual(SnpEntry(chrom="5", pos=1, refAllele="A", altAllele="G").chrom, Chrom("5"))

    def test_non_string_alleles(self):
        with self.assertRaises(FormatError):
            SnpEntry(chrom=Chrom("1"), pos=1, refAllele=None, altAllele="G")
        with self.assertRaises(FormatError):
            SnpEntry(chrom=Chrom("1"), pos=1, refAllele="A", altAllele=7)
