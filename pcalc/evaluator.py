"""
Direct interpretation: walk the tree, produce a value.

The environment is threaded through the walker rather than held globally,
so that separate sessions cannot step on each other.
"""
from boozetools.support.foundation import Visitor
from . import syntax, primitive
from .environment import Environment
from .values import Value, Boolean, TRUE, FALSE, ZERO, flag
from .errors import PcalcError, ArityMismatchError, TypeMismatchError

class Evaluator(Visitor):
	def __init__(self, env:Environment):
		self.env = env

	def visit_NumberLiteral(self, expr:syntax.NumberLiteral) -> Value:
		return expr.value

	def visit_BoolLiteral(self, expr:syntax.BoolLiteral) -> Value:
		return expr.value

	def visit_ConstantRef(self, expr:syntax.ConstantRef) -> Value:
		return expr.value

	def visit_VariableRef(self, expr:syntax.VariableRef) -> Value:
		try: return self.env.lookup(expr.name)
		except PcalcError as ex: raise ex.locate(expr.offset(), expr.width())

	def visit_VarDefine(self, expr:syntax.VarDefine) -> Value:
		value = self.visit(expr.init)
		try: return self.env.define_var(expr.name, value)
		except PcalcError as ex: raise ex.locate(expr.offset(), expr.width())

	def visit_Assign(self, expr:syntax.Assign) -> Value:
		value = self.visit(expr.expr)
		try: return self.env.assign(expr.name, value)
		except PcalcError as ex: raise ex.locate(expr.offset(), expr.width())

	def _flag(self, expr:syntax.Expression, op:str) -> bool:
		value = self.visit(expr)
		if isinstance(value, Boolean): return value.payload
		raise TypeMismatchError("'%s' needs boolean operands, not %s"%(op, value), str(value)).locate(expr.offset(), expr.width())

	def visit_BinaryOp(self, expr:syntax.BinaryOp) -> Value:
		op = expr.op
		if op in primitive.SHORTCUT:
			decider = primitive.SHORTCUT[op]
			if self._flag(expr.lhs, op) == decider: return flag(decider)
			return flag(self._flag(expr.rhs, op))
		lhs = self.visit(expr.lhs)
		rhs = self.visit(expr.rhs)
		try: return primitive.BINARY[op](lhs, rhs)
		except PcalcError as ex: raise ex.locate(expr.offset(), expr.width())

	def visit_UnaryOp(self, expr:syntax.UnaryOp) -> Value:
		operand = self.visit(expr.operand)
		try: return primitive.UNARY[expr.op](operand)
		except PcalcError as ex: raise ex.locate(expr.offset(), expr.width())

	def visit_Conditional(self, expr:syntax.Conditional) -> Value:
		cond = self.visit(expr.cond)
		if not isinstance(cond, Boolean):
			raise TypeMismatchError("The condition of 'if' must be boolean, not %s"%cond, str(cond)).locate(expr.cond.offset(), expr.cond.width())
		if cond.payload: return self.visit(expr.then_part)
		if expr.else_part is None: return FALSE
		return self.visit(expr.else_part)

	def visit_Sequence(self, expr:syntax.Sequence) -> Value:
		""" At top level, `last` follows along. Inside a call body it does not. """
		env = self.env
		result = ZERO
		for statement in expr.statements:
			result = self.visit(statement)
			if not env.depth(): env.last = result
		return result

	def visit_FunctionDef(self, expr:syntax.FunctionDef) -> Value:
		try: self.env.define_fn(expr.name, expr.params, expr.body)
		except PcalcError as ex: raise ex.locate(expr.offset(), expr.width())
		return TRUE

	def visit_FunctionCall(self, expr:syntax.FunctionCall) -> Value:
		env = self.env
		try: params, body = env.function(expr.name)
		except PcalcError as ex: raise ex.locate(expr.offset(), expr.width())
		if len(params) != len(expr.args):
			plural = '' if len(params) == 1 else 's'
			pattern = "'%s' takes %d argument%s, but got %d instead"
			raise ArityMismatchError(pattern%(expr.name, len(params), plural, len(expr.args)), expr.name).locate(expr.offset(), expr.width())
		# Arguments belong to the caller's scope, so evaluate them before the new frame exists.
		bindings = dict(zip(params, [self.visit(a) for a in expr.args]))
		try:
			with env.call_frame(bindings, expr.name) as frame:
				try: return self.visit(body)
				except PcalcError as ex:
					ex.called_from(frame.trace())
					raise
		except PcalcError as ex:
			raise ex.relocate(expr.offset(), expr.width())

	def visit_SpecialCall(self, expr:syntax.SpecialCall) -> Value:
		value = self.visit(expr.expr)
		self.env.write(str(value))
		return value

def evaluate(expr:syntax.Expression, env:Environment) -> Value:
	return Evaluator(env).visit(expr)
