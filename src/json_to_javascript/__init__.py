"""
Convert JSON data to JavaScript code literals, with optional multi-line
template literals for strings that survive a runtime ``dedent`` call.

	from json_to_javascript import convert

	result = convert(
		{"greeting": "Hello\\nWorld"},
		use_multiline_literals=True,
		prefix="export const config = (",
		suffix=") as const",
		formatter_options={"parser": "babel-ts"},
	)
	print(result.code)
"""

# Conversion
from json_to_javascript.converter import DEFAULT_MARKER as DEFAULT_MARKER
from json_to_javascript.converter import ConversionOptions as ConversionOptions
from json_to_javascript.converter import ConversionResult as ConversionResult
from json_to_javascript.converter import Converter as Converter
from json_to_javascript.converter import convert as convert

# Errors
from json_to_javascript.errors import FormatterError as FormatterError
from json_to_javascript.errors import FormattingError as FormattingError
from json_to_javascript.errors import (
	InternalConsistencyError as InternalConsistencyError,
)
from json_to_javascript.errors import JsonToJavascriptError as JsonToJavascriptError
from json_to_javascript.errors import MarkerCollisionError as MarkerCollisionError
from json_to_javascript.errors import (
	PlaceholderNotFoundError as PlaceholderNotFoundError,
)

# Formatters
from json_to_javascript.formatter import Formatter as Formatter
from json_to_javascript.formatter import NullFormatter as NullFormatter
from json_to_javascript.formatter import PrettierFormatter as PrettierFormatter

# Classifier and serializer
from json_to_javascript.multiline import is_eligible as is_eligible
from json_to_javascript.serializer import OMIT as OMIT
from json_to_javascript.serializer import stringify as stringify
from json_to_javascript.version import __version__ as __version__
