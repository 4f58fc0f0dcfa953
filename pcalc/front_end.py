"""
Recursive-descent parser for prefix notation.

There are no parentheses. Every operator consumes exactly as many
sub-expressions as its arity says, and each of those ends itself by
the same rule. Only the constructs with a variable number of parts
(if, def, call) need explicit terminators: fi, end, and cend.
"""
from typing import Iterator
from . import syntax, primitive
from .scanner import Token, scan, NUMBER, IDENTIFIER, KEYWORD, OPERATOR, PUNCTUATION, END
from .errors import PcalcSyntaxError, IncompleteInput, RedefinitionError

SEMICOLON = ";"

class Parser:
	def __init__(self, tokens:tuple[Token, ...]):
		assert tokens and tokens[-1].kind == END
		self._tokens = tokens
		self._index = 0

	def peek(self) -> Token:
		return self._tokens[self._index]

	def advance(self) -> Token:
		token = self._tokens[self._index]
		if token.kind != END: self._index += 1
		return token

	def at_end(self) -> bool:
		return self.peek().kind == END

	def _at(self, lexeme:str) -> bool:
		token = self.peek()
		return token.kind in (KEYWORD, PUNCTUATION) and token.lexeme == lexeme

	def _skip_semicolons(self):
		while self._at(SEMICOLON): self.advance()

	def expect(self, lexeme:str, context:str) -> Token:
		token = self.advance()
		if token.kind in (KEYWORD, PUNCTUATION) and token.lexeme == lexeme:
			return token
		if token.kind == END:
			raise IncompleteInput("Incomplete %s - missing '%s'"%(context, lexeme), token.lexeme, token.offset)
		raise PcalcSyntaxError("Invalid %s - expecting '%s' but found '%s'"%(context, lexeme, token.lexeme), token.lexeme, token.offset)

	def each_statement(self) -> Iterator[syntax.Expression]:
		""" Top-level statements, one at a time, separated by semicolons. """
		while True:
			self._skip_semicolons()
			if self.at_end(): return
			statement = self.expression()
			if not (self.at_end() or self._at(SEMICOLON)):
				token = self.peek()
				raise PcalcSyntaxError("Expecting ';' between statements, found '%s'"%token.lexeme, token.lexeme, token.offset)
			yield statement

	def expression(self) -> syntax.Expression:
		token = self.advance()
		kind = token.kind
		if kind == NUMBER:
			return syntax.NumberLiteral(token)
		if kind == IDENTIFIER:
			if token.lexeme in primitive.CONSTANTS:
				return syntax.ConstantRef(token, primitive.CONSTANTS[token.lexeme])
			return syntax.VariableRef(token)
		if kind == OPERATOR:
			if primitive.ARITY[token.lexeme] == 2:
				lhs = self.expression()
				return syntax.BinaryOp(token, lhs, self.expression())
			return syntax.UnaryOp(token, self.expression())
		if kind == KEYWORD:
			try: method = _KEYWORD_PARSERS[token.lexeme]
			except KeyError: raise PcalcSyntaxError("Invalid expression containing '%s'"%token.lexeme, token.lexeme, token.offset)
			return method(self, token)
		if kind == END:
			raise IncompleteInput("Expecting token", token.lexeme, token.offset)
		assert kind == PUNCTUATION, kind
		raise PcalcSyntaxError("Unexpected '%s'"%token.lexeme, token.lexeme, token.offset)

	def defined_name(self, context:str) -> str:
		""" A name about to be defined (or assigned) must be a plain, unreserved identifier. """
		token = self.advance()
		if token.kind == END:
			raise IncompleteInput("Incomplete %s"%context, token.lexeme, token.offset)
		if token.lexeme[0].isalpha() and primitive.is_reserved(token.lexeme):
			raise RedefinitionError("Invalid %s name - '%s' is reserved"%(context, token.lexeme), token.lexeme, token.offset)
		if token.kind != IDENTIFIER:
			raise PcalcSyntaxError("Invalid %s name - '%s'"%(context, token.lexeme), token.lexeme, token.offset)
		return token.lexeme

	def parse_literal(self, token:Token):
		return syntax.BoolLiteral(token)

	def parse_var(self, token:Token):
		name = self.defined_name("variable definition")
		return syntax.VarDefine(token, name, self.expression())

	def parse_assign(self, token:Token):
		name = self.defined_name("set variable")
		return syntax.Assign(token, name, self.expression())

	def parse_if(self, token:Token):
		cond = self.expression()
		self.expect("?", "if expression")
		then_part = self.expression()
		if self._at(":"):
			self.advance()
			else_part = self.expression()
		elif self._at("fi"):
			else_part = None
		else:
			nxt = self.peek()
			if nxt.kind == END:
				raise IncompleteInput("Incomplete if expression - missing 'fi'", nxt.lexeme, nxt.offset)
			raise PcalcSyntaxError("Invalid if expression - expecting ':' or 'fi' but found '%s'"%nxt.lexeme, nxt.lexeme, nxt.offset)
		self.expect("fi", "if expression")
		return syntax.Conditional(token, cond, then_part, else_part)

	def parse_def(self, token:Token):
		name = self.defined_name("function definition")
		params = []
		while not self._at("begin"):
			if self.at_end():
				nxt = self.peek()
				raise IncompleteInput("Incomplete function definition - missing 'begin'", nxt.lexeme, nxt.offset)
			offset = self.peek().offset
			param = self.defined_name("function parameter")
			if param in params:
				raise RedefinitionError("Parameter '%s' appears twice in '%s'"%(param, name), param, offset)
			params.append(param)
		begin = self.advance()
		statements = []
		while True:
			self._skip_semicolons()
			if self._at("end"): break
			if self.at_end():
				nxt = self.peek()
				raise IncompleteInput("Incomplete function definition - missing 'end'", nxt.lexeme, nxt.offset)
			statements.append(self.expression())
		self.advance()
		return syntax.FunctionDef(token, name, params, syntax.Sequence(begin, statements))

	def parse_call(self, token:Token):
		callee = self.advance()
		if callee.kind == END:
			raise IncompleteInput("Incomplete function call", callee.lexeme, callee.offset)
		if callee.kind != IDENTIFIER:
			raise PcalcSyntaxError("Invalid function call - '%s' is not a function name"%callee.lexeme, callee.lexeme, callee.offset)
		args = []
		while not self._at("cend"):
			if self.at_end():
				nxt = self.peek()
				raise IncompleteInput("Incomplete function call - missing 'cend'", nxt.lexeme, nxt.offset)
			args.append(self.expression())
		self.advance()
		return syntax.FunctionCall(token, callee.lexeme, args)

	def parse_special(self, token:Token):
		return syntax.SpecialCall(token, self.expression())

_KEYWORD_PARSERS = {
	"true": Parser.parse_literal,
	"false": Parser.parse_literal,
	primitive.DEFVAR: Parser.parse_var,
	primitive.SETVAR: Parser.parse_assign,
	"if": Parser.parse_if,
	"def": Parser.parse_def,
	"call": Parser.parse_call,
	"print": Parser.parse_special,
	"xprint": Parser.parse_special,
}

def parse_text(text:str) -> syntax.Sequence:
	""" The whole text at once, as one top-level sequence. """
	tokens = scan(text)
	return syntax.Sequence(tokens[0], list(Parser(tokens).each_statement()))
