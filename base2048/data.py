"""Default Base2048 repertoire.

Both tables are listed as inclusive ``(first, last)`` code point ranges in
ascending order. Every main code point sits below U+1100 so that channels
which weight code points by range count each one as a single unit. Letters
and digits carrying a canonical or compatibility decomposition are left out
so the encoded text survives Unicode normalization unchanged.
"""

from typing import Iterable, List, Tuple

MAIN_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x0038, 0x0039),
    (0x0041, 0x005A),
    (0x0061, 0x007A),
    (0x00C6, 0x00C6),
    (0x00D0, 0x00D0),
    (0x00D8, 0x00D8),
    (0x00DE, 0x00DF),
    (0x00E6, 0x00E6),
    (0x00F0, 0x00F0),
    (0x00F8, 0x00F8),
    (0x00FE, 0x00FE),
    (0x0110, 0x0111),
    (0x0126, 0x0127),
    (0x0131, 0x0131),
    (0x0138, 0x0138),
    (0x0141, 0x0142),
    (0x014A, 0x014B),
    (0x0152, 0x0153),
    (0x0166, 0x0167),
    (0x0180, 0x019F),
    (0x01A2, 0x01AE),
    (0x01B1, 0x01BF),
    (0x01DD, 0x01DD),
    (0x01E4, 0x01E5),
    (0x01F6, 0x01F7),
    (0x021C, 0x021D),
    (0x0220, 0x0225),
    (0x0234, 0x024F),
    (0x0250, 0x02AF),
    (0x0370, 0x0373),
    (0x0376, 0x0377),
    (0x037B, 0x037D),
    (0x0391, 0x03A1),
    (0x03A3, 0x03A9),
    (0x03B1, 0x03C9),
    (0x03CF, 0x03CF),
    (0x03D7, 0x03EF),
    (0x03F3, 0x03F3),
    (0x03F7, 0x03F8),
    (0x03FA, 0x03FB),
    (0x0402, 0x0402),
    (0x0404, 0x0406),
    (0x0408, 0x040B),
    (0x040F, 0x0418),
    (0x041A, 0x0438),
    (0x043A, 0x044F),
    (0x0452, 0x0452),
    (0x0454, 0x0456),
    (0x0458, 0x045B),
    (0x045F, 0x0475),
    (0x0478, 0x0481),
    (0x048A, 0x04BF),
    (0x04C0, 0x04C0),
    (0x04C3, 0x04CF),
    (0x04D4, 0x04D5),
    (0x04D8, 0x04D9),
    (0x04E0, 0x04E1),
    (0x04E8, 0x04E9),
    (0x04F6, 0x04F7),
    (0x04FA, 0x052F),
    (0x0531, 0x0556),
    (0x0561, 0x0586),
    (0x05D0, 0x05EA),
    (0x05F0, 0x05F2),
    (0x0620, 0x0621),
    (0x0627, 0x063F),
    (0x0641, 0x064A),
    (0x0660, 0x0669),
    (0x066E, 0x066F),
    (0x0671, 0x0673),
    (0x0679, 0x06BF),
    (0x06C1, 0x06C1),
    (0x06C3, 0x06D2),
    (0x06D5, 0x06D5),
    (0x06EE, 0x06FC),
    (0x06FF, 0x06FF),
    (0x0710, 0x0710),
    (0x0712, 0x072F),
    (0x074D, 0x077F),
    (0x0780, 0x07A5),
    (0x07B1, 0x07B1),
    (0x07C0, 0x07EA),
    (0x0800, 0x0815),
    (0x0840, 0x0858),
    (0x0904, 0x0928),
    (0x092A, 0x0930),
    (0x0932, 0x0933),
    (0x0935, 0x0939),
    (0x093D, 0x093D),
    (0x0950, 0x0950),
    (0x0960, 0x0961),
    (0x0966, 0x096F),
    (0x0972, 0x097F),
    (0x0985, 0x098C),
    (0x098F, 0x0990),
    (0x0993, 0x09A8),
    (0x09AA, 0x09B0),
    (0x09B2, 0x09B2),
    (0x09B6, 0x09B9),
    (0x09BD, 0x09BD),
    (0x09CE, 0x09CE),
    (0x09E0, 0x09E1),
    (0x09E6, 0x09F1),
    (0x0A05, 0x0A0A),
    (0x0A0F, 0x0A10),
    (0x0A13, 0x0A28),
    (0x0A2A, 0x0A30),
    (0x0A32, 0x0A32),
    (0x0A35, 0x0A35),
    (0x0A38, 0x0A39),
    (0x0A5C, 0x0A5C),
    (0x0A66, 0x0A6F),
    (0x0A72, 0x0A74),
    (0x0A85, 0x0A8D),
    (0x0A8F, 0x0A91),
    (0x0A93, 0x0AA8),
    (0x0AAA, 0x0AB0),
    (0x0AB2, 0x0AB3),
    (0x0AB5, 0x0AB9),
    (0x0ABD, 0x0ABD),
    (0x0AD0, 0x0AD0),
    (0x0AE0, 0x0AE1),
    (0x0AE6, 0x0AEF),
    (0x0B05, 0x0B0C),
    (0x0B0F, 0x0B10),
    (0x0B13, 0x0B28),
    (0x0B2A, 0x0B30),
    (0x0B32, 0x0B33),
    (0x0B35, 0x0B39),
    (0x0B3D, 0x0B3D),
    (0x0B5F, 0x0B61),
    (0x0B66, 0x0B6F),
    (0x0B71, 0x0B71),
    (0x0B83, 0x0B83),
    (0x0B85, 0x0B8A),
    (0x0B8E, 0x0B90),
    (0x0B92, 0x0B93),
    (0x0B95, 0x0B95),
    (0x0B99, 0x0B9A),
    (0x0B9C, 0x0B9C),
    (0x0B9E, 0x0B9F),
    (0x0BA3, 0x0BA4),
    (0x0BA8, 0x0BAA),
    (0x0BAE, 0x0BB9),
    (0x0BD0, 0x0BD0),
    (0x0BE6, 0x0BEF),
    (0x0C05, 0x0C0C),
    (0x0C0E, 0x0C10),
    (0x0C12, 0x0C28),
    (0x0C2A, 0x0C39),
    (0x0C3D, 0x0C3D),
    (0x0C58, 0x0C5A),
    (0x0C60, 0x0C61),
    (0x0C66, 0x0C6F),
    (0x0C80, 0x0C80),
    (0x0C85, 0x0C8C),
    (0x0C8E, 0x0C90),
    (0x0C92, 0x0CA8),
    (0x0CAA, 0x0CB3),
    (0x0CB5, 0x0CB9),
    (0x0CBD, 0x0CBD),
    (0x0CDE, 0x0CDE),
    (0x0CE0, 0x0CE1),
    (0x0CE6, 0x0CEF),
    (0x0CF1, 0x0CF2),
    (0x0D05, 0x0D0C),
    (0x0D0E, 0x0D10),
    (0x0D12, 0x0D3A),
    (0x0D3D, 0x0D3D),
    (0x0D4E, 0x0D4E),
    (0x0D60, 0x0D61),
    (0x0D66, 0x0D6F),
    (0x0D7A, 0x0D7F),
    (0x0D85, 0x0D96),
    (0x0D9A, 0x0DB1),
    (0x0DB3, 0x0DBB),
    (0x0DBD, 0x0DBD),
    (0x0DC0, 0x0DC6),
    (0x0E01, 0x0E30),
    (0x0E32, 0x0E32),
    (0x0E40, 0x0E45),
    (0x0E50, 0x0E59),
    (0x0E81, 0x0E82),
    (0x0E84, 0x0E84),
    (0x0E87, 0x0E88),
    (0x0E8A, 0x0E8A),
    (0x0E8D, 0x0E8D),
    (0x0E94, 0x0E97),
    (0x0E99, 0x0E9F),
    (0x0EA1, 0x0EA3),
    (0x0EA5, 0x0EA5),
    (0x0EA7, 0x0EA7),
    (0x0EAA, 0x0EAB),
    (0x0EAD, 0x0EB0),
    (0x0EB2, 0x0EB2),
    (0x0EBD, 0x0EBD),
    (0x0EC0, 0x0EC4),
    (0x0ED0, 0x0ED9),
    (0x0EDE, 0x0EDF),
    (0x0F00, 0x0F00),
    (0x0F20, 0x0F29),
    (0x0F40, 0x0F42),
    (0x0F44, 0x0F47),
    (0x0F49, 0x0F4C),
    (0x0F4E, 0x0F51),
    (0x0F53, 0x0F56),
    (0x0F58, 0x0F5B),
    (0x0F5D, 0x0F68),
    (0x0F6A, 0x0F6C),
    (0x0F88, 0x0F8C),
    (0x1000, 0x1025),
    (0x1027, 0x102A),
    (0x103F, 0x1049),
    (0x1050, 0x1055),
    (0x105A, 0x105D),
    (0x1061, 0x1061),
    (0x1065, 0x1066),
    (0x106E, 0x1070),
    (0x1075, 0x1081),
    (0x108E, 0x108E),
    (0x1090, 0x1099),
    (0x10A0, 0x10C5),
    (0x10D0, 0x10FA),
)

# ASCII digits 0-7
TAIL_RANGES: Tuple[Tuple[int, int], ...] = ((0x0030, 0x0037),)


def expand_ranges(ranges: Iterable[Tuple[int, int]]) -> List[int]:
    code_points: List[int] = []
    for first, last in ranges:
        if last < first:
            raise ValueError(f"range U+{first:04X}..U+{last:04X} is empty")
        code_points.extend(range(first, last + 1))
    return code_points


DEFAULT_MAIN_CODE_POINTS: Tuple[int, ...] = tuple(expand_ranges(MAIN_RANGES))
DEFAULT_TAIL_CODE_POINTS: Tuple[int, ...] = tuple(expand_ranges(TAIL_RANGES))
