"""
The built-in registry: reserved words, constants, and the operator tables.
The parser consults this for arity; the evaluator consults it for semantics.

Python's math module raises where IEEE-754 arithmetic would quietly produce
an infinity or a NaN. The wrappers here restore the quiet behavior, so that
dividing by zero (and friends) yields a value, never an error.
"""
import math, operator
from .values import Value, Number, Boolean, flag
from .errors import TypeMismatchError

INF, NAN = math.inf, math.nan

DEFVAR = "var"
SETVAR = "="
LAST = "last"

KEYWORDS = frozenset([
	DEFVAR, SETVAR, "if", "fi", "def", "begin", "end", "call", "cend", "print", "xprint", "true", "false",
])

CONSTANTS = {
	"pi": Number(math.pi),
	"tau": Number(math.tau),
	"e": Number(math.e),
	"phi": Number(1.618033988749895),
}

###############################################################################
#  IEEE-flavored arithmetic on plain floats

def _is_odd_integer(y:float) -> bool:
	return math.isfinite(y) and y.is_integer() and int(y) % 2 == 1

def divide(a:float, b:float) -> float:
	if b == 0:
		if a == 0 or math.isnan(a): return NAN
		return math.copysign(INF, a) * math.copysign(1.0, b)
	return a / b

def remainder(a:float, b:float) -> float:
	try: return math.fmod(a, b)
	except ValueError: return NAN

def power(a:float, b:float) -> float:
	if a == 0 and b < 0:
		return math.copysign(INF, a) if _is_odd_integer(b) else INF
	try: return math.pow(a, b)
	except ValueError: return NAN
	except OverflowError:
		return -INF if a < 0 and _is_odd_integer(b) else INF

def maximum(a:float, b:float) -> float:
	if math.isnan(a) or math.isnan(b): return NAN
	return max(a, b)

def minimum(a:float, b:float) -> float:
	if math.isnan(a) or math.isnan(b): return NAN
	return min(a, b)

def _quiet(fn, overflow=INF):
	""" Domain errors become NaN; overflow becomes an infinity with the sign of the input (or as given). """
	def quiet(x:float) -> float:
		if math.isnan(x): return NAN
		try: return fn(x)
		except ValueError: return NAN
		except OverflowError: return math.copysign(INF, x) if overflow is None else overflow
	return quiet

def _logarithm(fn):
	def log(x:float) -> float:
		if x == 0: return -INF
		if x < 0 or math.isnan(x): return NAN
		return fn(x)
	return log

def _atanh(x:float) -> float:
	if abs(x) == 1: return math.copysign(INF, x)
	try: return math.atanh(x)
	except ValueError: return NAN

def _rounding(fn):
	""" math.floor and friends return int and choke on infinities. """
	def rounder(x:float) -> float:
		if not math.isfinite(x): return x
		return float(fn(x))
	return rounder

def _round(x:float) -> float:
	""" Half away from zero, not banker's rounding. """
	if not math.isfinite(x): return x
	return math.copysign(math.floor(abs(x) + 0.5), x)

def _sign(x:float) -> float:
	if math.isnan(x): return NAN
	return math.copysign(1.0, x)

def _fract(x:float) -> float:
	if not math.isfinite(x): return NAN
	return x - math.trunc(x)

###############################################################################
#  Operators in terms of Values

def _numeric(fn):
	def op(a:Value, b:Value) -> Number:
		return Number(fn(a.as_number(), b.as_number()))
	return op

def _compare(fn):
	def op(a:Value, b:Value) -> Boolean:
		if type(a) is not type(b):
			raise TypeMismatchError("cannot compare %s with %s"%(a.kind, b.kind))
		return flag(fn(a.payload, b.payload))
	return op

BINARY = {
	"+": _numeric(operator.add),
	"-": _numeric(operator.sub),
	"*": _numeric(operator.mul),
	"/": _numeric(divide),
	"%": _numeric(remainder),
	"^": _numeric(power),
	"max": _numeric(maximum),
	"min": _numeric(minimum),
	"==": _compare(operator.eq),
	"!=": _compare(operator.ne),
	"<": _compare(operator.lt),
	"<=": _compare(operator.le),
	">": _compare(operator.gt),
	">=": _compare(operator.ge),
}

# The short-circuit operators, and the left-hand value that decides each one.
SHORTCUT = {
	"and": False,
	"or": True,
}

_MATH = {
	"sqrt": _quiet(math.sqrt),
	"exp": _quiet(math.exp),
	"exp2": lambda x: power(2.0, x),
	"ln": _logarithm(math.log),
	"log2": _logarithm(math.log2),
	"log10": _logarithm(math.log10),
	"sin": _quiet(math.sin),
	"cos": _quiet(math.cos),
	"tan": _quiet(math.tan),
	"sinh": _quiet(math.sinh, overflow=None),
	"cosh": _quiet(math.cosh),
	"tanh": _quiet(math.tanh),
	"asin": _quiet(math.asin),
	"acos": _quiet(math.acos),
	"atan": _quiet(math.atan),
	"asinh": _quiet(math.asinh),
	"acosh": _quiet(math.acosh),
	"atanh": _atanh,
	"sign": _sign,
	"abs": abs,
	"recip": lambda x: divide(1.0, x),
	"fract": _fract,
	"trunc": _rounding(math.trunc),
	"ceil": _rounding(math.ceil),
	"floor": _rounding(math.floor),
	"round": _round,
	"neg": operator.neg,
}

def _as_num(v:Value) -> Number:
	return Number(1 if v.payload else 0) if isinstance(v, Boolean) else v

def _as_bool(v:Value) -> Boolean:
	return flag(v.payload != 0) if isinstance(v, Number) else v

def _unary_numeric(fn):
	def op(v:Value) -> Number:
		return Number(fn(v.as_number()))
	return op

UNARY = {name:_unary_numeric(fn) for name, fn in _MATH.items()}
UNARY["not"] = lambda v: flag(not v.as_flag())
UNARY["asnum"] = _as_num
UNARY["asbool"] = _as_bool

ARITY = {**{op:2 for op in BINARY}, **{op:2 for op in SHORTCUT}, **{op:1 for op in UNARY}}
OPERATORS = frozenset(ARITY)

RESERVED = KEYWORDS | OPERATORS | frozenset(CONSTANTS) | {LAST}

def is_reserved(name:str) -> bool:
	return name in RESERVED
