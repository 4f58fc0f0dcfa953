"""
Break a line of text into tokens.

Words are separated by whitespace, except that ; ? and : always stand alone.
The longest match wins; among equally long matches, the rule defined first.
"""
import sys
from typing import NamedTuple
from boozetools.scanning import miniscan
from boozetools.scanning.engine import IterableScanner
from . import primitive
from .errors import LexError

NUMBER = "number"
IDENTIFIER = "identifier"
KEYWORD = "keyword"
OPERATOR = "operator"
PUNCTUATION = "punctuation"
END = "<END>"

NUMERIC_START = frozenset("0123456789.")

class Token(NamedTuple):
	kind: str
	lexeme: str
	offset: int

	def width(self): return len(self.lexeme)

def _emit(yy:IterableScanner, kind:str):
	yy.token(kind, Token(kind, sys.intern(yy.match()), yy.left))

def _reserved_kind(word:str):
	if word in primitive.OPERATORS: return OPERATOR
	if word in primitive.KEYWORDS: return KEYWORD

LEX = miniscan.Definition()
LEX.ignore(r'\s+')

@LEX.on(r'[;?:]')
def scan_punctuation(yy:IterableScanner): _emit(yy, PUNCTUATION)

@LEX.on(r'-?(\d+(\.\d*)?|\.\d+)')
def scan_number(yy:IterableScanner): _emit(yy, NUMBER)

@LEX.on(r'\l\w*')
def scan_word(yy:IterableScanner): _emit(yy, _reserved_kind(yy.match()) or IDENTIFIER)

@LEX.on(r'[^\s;?:]+')
def scan_symbol(yy:IterableScanner):
	""" Anything else up to the next break: an operator symbol, or else a mistake. """
	word = yy.match()
	kind = _reserved_kind(word)
	if kind: return _emit(yy, kind)
	if word.lstrip("-")[:1] in NUMERIC_START:
		raise LexError("Malformed number - '%s'"%word, word, yy.left)
	raise LexError("Invalid identifier - '%s'"%word, word, yy.left)

def scan(text:str) -> tuple[Token, ...]:
	""" The whole statement's worth of tokens, always ending with an END token. """
	tokens = [token for kind, token in LEX.scan(text)]
	tokens.append(Token(END, "", len(text)))
	return tuple(tokens)
