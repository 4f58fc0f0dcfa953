"""
Where names live.

Resolution runs innermost call frame, then globals, then constants, then `last`.
A function body sees its own frame and the globals, never its caller's frame.
"""
import sys
from contextlib import contextmanager
from typing import Optional, Sequence, TextIO
from . import primitive
from .values import Value, ZERO
from .stacking import RootFrame, Activation
from .errors import RedefinitionError, UndefinedSymbolError, StackOverflow

class Environment:
	def __init__(self, *, out:Optional[TextIO]=None, max_depth:Optional[int]=None):
		"""
		out: where print and xprint write. Defaults to whatever sys.stdout is at the time.
		max_depth: how many nested calls to allow before declaring a stack overflow.
		           If None, the host's own recursion limit is the only bound.
		"""
		self.out = out
		self.max_depth = max_depth
		self.constants = primitive.CONSTANTS
		self._globals = RootFrame()
		self._functions = {}
		self._frames: list[Activation] = []
		self.last: Value = ZERO
	
	@staticmethod
	def _check_name(name:str, what:str):
		if primitive.is_reserved(name):
			raise RedefinitionError("Cannot define %s '%s': the name is reserved"%(what, name), name)
	
	def _innermost(self):
		return self._frames[-1] if self._frames else self._globals
	
	def define_var(self, name:str, value:Value) -> Value:
		self._check_name(name, "variable")
		return self._innermost().assign(name, value)
	
	def assign(self, name:str, value:Value) -> Value:
		self._check_name(name, "variable")
		for frame in self._innermost(), self._globals:
			if frame.holds(name): return frame.assign(name, value)
		raise UndefinedSymbolError("Cannot set undefined variable '%s'"%name, name)
	
	def lookup(self, name:str) -> Value:
		for frame in self._innermost(), self._globals:
			if frame.holds(name): return frame.fetch(name)
		if name in self.constants: return self.constants[name]
		if name == primitive.LAST: return self.last
		raise UndefinedSymbolError("Unknown variable '%s'"%name, name)
	
	def define_fn(self, name:str, params:Sequence[str], body):
		self._check_name(name, "function")
		self._functions[name] = (tuple(params), body)
	
	def function(self, name:str):
		""" The (params, body) pair registered under this name. """
		try: return self._functions[name]
		except KeyError: raise UndefinedSymbolError("Unknown function '%s'"%name, name) from None
	
	def call_frame_push(self, bindings:dict[str, Value], breadcrumb:str=None):
		if self.max_depth is not None and len(self._frames) >= self.max_depth:
			raise StackOverflow("Too many nested calls (limit %d)"%self.max_depth, breadcrumb)
		self._frames.append(Activation(bindings, breadcrumb))
	
	def call_frame_pop(self):
		self._frames.pop()
	
	@contextmanager
	def call_frame(self, bindings:dict[str, Value], breadcrumb:str=None):
		self.call_frame_push(bindings, breadcrumb)
		try: yield self._frames[-1]
		finally: self.call_frame_pop()
	
	def depth(self) -> int: return len(self._frames)
	
	def unwind(self):
		""" Drop every call frame. Only needed after the host stack gives out. """
		self._frames.clear()
	
	def reset(self):
		""" Forget all variables and functions. Constants, of course, remain. """
		self._globals.clear()
		self._functions.clear()
		self._frames.clear()
		self.last = ZERO
	
	def write(self, text:str):
		print(text, file=self.out or sys.stdout)
	
	# Read-only views, mainly for a driver's :env command.
	
	def variables(self) -> dict[str, Value]:
		return dict(self._globals.items())
	
	def functions(self) -> dict[str, tuple]:
		return {name: params for name, (params, body) in self._functions.items()}
	
	def describe(self) -> list[str]:
		lines = ["%s = %s"%(k, v) for k, v in sorted(self._globals.items())]
		if lines and self._functions: lines.append("")
		lines.extend("%s(%s)"%(name, ", ".join(params)) for name, params in sorted(self.functions().items()))
		return lines
	
	def __len__(self): return len(self._globals) + len(self._functions)
	
	def is_empty(self) -> bool: return not len(self)
