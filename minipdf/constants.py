PDF_HEADER = b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n"

# Width x height in points.
A4_SIZE = (595, 842)
LETTER_SIZE = (612, 792)
LEGAL_SIZE = (612, 1008)

DEFAULT_MARGIN = 40

# Resource key every page uses for the shared font object.
DEFAULT_FONT_KEY = "F1"
DEFAULT_BASE_FONT = "Helvetica"
DEFAULT_FONT_SIZE = 12

# cp1252 matches /WinAnsiEncoding closely enough for the standard fonts.
CONTENT_ENCODING = "cp1252"

PRODUCER = "minipdf"
