"""
The run-time values are a closed, tagged pair: numbers and flags.
They do not mix. The only crossings are the explicit `asnum` and `asbool` conversions.
"""
import math
from decimal import Decimal
from .errors import TypeMismatchError

class Value:
	""" Immutable. Two values are equal only if they have the same kind and the same payload. """
	__slots__ = ('payload',)
	kind = "value"
	
	def __init__(self, payload):
		object.__setattr__(self, 'payload', payload)
	
	def __setattr__(self, key, value):
		raise AttributeError("%s is immutable"%type(self).__name__)
	
	def __eq__(self, other):
		return type(self) is type(other) and self.payload == other.payload
	
	def __ne__(self, other): return not self == other
	
	def __hash__(self): return hash((self.kind, self.payload))
	
	def __repr__(self): return "%s(%r)"%(type(self).__name__, self.payload)
	
	def as_number(self) -> float:
		raise TypeMismatchError("%s is not a number"%self, str(self))
	
	def as_flag(self) -> bool:
		raise TypeMismatchError("%s is not a boolean"%self, str(self))

class Number(Value):
	__slots__ = ()
	kind = "number"
	
	def __init__(self, payload):
		assert not isinstance(payload, bool), payload
		super().__init__(float(payload))
	
	def __str__(self):
		x = self.payload
		if math.isnan(x): return "NaN"
		if math.isinf(x): return "inf" if x > 0 else "-inf"
		# Shortest round-trip digits, but never in exponent form.
		digits = Decimal(repr(x))
		if x.is_integer():
			if x == 0: return "-0" if math.copysign(1.0, x) < 0 else "0"
			digits = digits.to_integral_value()
		return format(digits, "f")
	
	def as_number(self) -> float: return self.payload

class Boolean(Value):
	__slots__ = ()
	kind = "boolean"
	
	def __init__(self, payload):
		assert isinstance(payload, bool), payload
		super().__init__(payload)
	
	def __str__(self): return "true" if self.payload else "false"
	
	def as_flag(self) -> bool: return self.payload

TRUE = Boolean(True)
FALSE = Boolean(False)
ZERO = Number(0)

def flag(b:bool) -> Boolean:
	return TRUE if b else FALSE
