"""
Everything that can go wrong with a statement, by kind.
Each error knows roughly where in the statement text it happened,
so the diagnostics can point at the guilty token.
"""
from typing import Optional

MAX_TRAIL = 8

class PcalcError(Exception):
	""" Base for every error the core reports at a statement boundary. """
	kind = "Error"
	offset: Optional[int] = None
	width: int = 0
	
	def __init__(self, message:str, subject:str=None, offset:int=None):
		super().__init__(message)
		self.message = message
		self.subject = subject
		self.trail = []
		self.elided = 0
		if offset is not None: self.locate(offset, len(subject or ""))
	
	def locate(self, offset:int, width:int):
		""" First come, first served: the innermost location sticks. """
		if self.offset is None:
			self.offset, self.width = offset, width
		return self

	def relocate(self, offset:int, width:int):
		"""
		Offsets inside a function body refer to the text of the definition,
		not the statement now running. So an error escaping a call points at the call.
		"""
		self.offset, self.width = offset, width
		return self

	def called_from(self, crumb:str):
		""" Innermost call first. Deep recursion would make this absurd, so it stops growing. """
		if len(self.trail) < MAX_TRAIL: self.trail.append(crumb)
		else: self.elided += 1

	def __str__(self): return "%s: %s"%(self.kind, self.message)

class LexError(PcalcError):
	kind = "LexError"

class PcalcSyntaxError(PcalcError):
	kind = "SyntaxError"

class IncompleteInput(PcalcSyntaxError):
	""" Input ran out part-way through a construct. A REPL might ask for another line. """

class UndefinedSymbolError(PcalcError):
	kind = "UndefinedSymbolError"

class RedefinitionError(PcalcError):
	kind = "RedefinitionError"

class TypeMismatchError(PcalcError):
	kind = "TypeMismatchError"

class ArityMismatchError(PcalcError):
	kind = "ArityMismatchError"

class StackOverflow(PcalcError):
	kind = "StackOverflow"
