"""
Activation records: one for the globals, and one per function call in progress.
"""
from typing import Iterable
from .values import Value

class Frame:
	_bindings : dict[str, Value]
	
	def holds(self, key:str) -> bool: return key in self._bindings
	def assign(self, key:str, value:Value) -> Value:
		self._bindings[key] = value
		return value
	def fetch(self, key:str) -> Value: return self._bindings[key]
	def items(self) -> Iterable[tuple[str, Value]]: return self._bindings.items()
	def __len__(self): return len(self._bindings)

class RootFrame(Frame):
	""" The global variables. These outlive every call. """
	def __init__(self):
		self._bindings = {}
	def clear(self): self._bindings.clear()

class Activation(Frame):
	"""
	Parameters, plus whatever the body defines with `var`.
	Gone as soon as the call returns.
	"""
	def __init__(self, bindings:dict[str, Value], breadcrumb:str=None):
		self._bindings = dict(bindings)
		self.breadcrumb = breadcrumb
	
	def trace(self) -> str:
		""" Something like f2c(f=54), for the benefit of error messages. """
		args = ", ".join("%s=%s"%(k, v) for k, v in self._bindings.items())
		return "%s(%s)"%(self.breadcrumb or "?", args)
