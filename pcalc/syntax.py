"""
The set of parse-nodes.
The parser calls these constructors with subordinate nodes in a top-down recursive descent.
Every node remembers the token that introduced it, so that errors can point somewhere useful.
"""
from typing import Optional, Iterable
from .scanner import Token
from .values import Value, Number, Boolean

class Phrase:
	""" Anything the parser builds. """
	head: Token

	def offset(self) -> int: return self.head.offset
	def width(self) -> int: return self.head.width()

class Expression(Phrase):
	pass

class NumberLiteral(Expression):
	def __init__(self, head:Token):
		self.head = head
		self.value = Number(float(head.lexeme))
	def __repr__(self): return str(self.value)

class BoolLiteral(Expression):
	def __init__(self, head:Token):
		self.head = head
		self.value = Boolean(head.lexeme == "true")
	def __repr__(self): return str(self.value)

class ConstantRef(Expression):
	def __init__(self, head:Token, value:Value):
		self.head = head
		self.name = head.lexeme
		self.value = value
	def __repr__(self): return self.name

class VariableRef(Expression):
	def __init__(self, head:Token):
		self.head = head
		self.name = head.lexeme
	def __repr__(self): return "<ref:%s>"%self.name

class VarDefine(Expression):
	def __init__(self, head:Token, name:str, init:Expression):
		self.head, self.name, self.init = head, name, init
	def __repr__(self): return "(var %s %r)"%(self.name, self.init)

class Assign(Expression):
	def __init__(self, head:Token, name:str, expr:Expression):
		self.head, self.name, self.expr = head, name, expr
	def __repr__(self): return "(= %s %r)"%(self.name, self.expr)

class BinaryOp(Expression):
	def __init__(self, head:Token, lhs:Expression, rhs:Expression):
		self.head = head
		self.op = head.lexeme
		self.lhs, self.rhs = lhs, rhs
	def __repr__(self): return "(%s %r %r)"%(self.op, self.lhs, self.rhs)

class UnaryOp(Expression):
	def __init__(self, head:Token, operand:Expression):
		self.head = head
		self.op = head.lexeme
		self.operand = operand
	def __repr__(self): return "(%s %r)"%(self.op, self.operand)

class Conditional(Expression):
	def __init__(self, head:Token, cond:Expression, then_part:Expression, else_part:Optional[Expression]):
		self.head = head
		self.cond, self.then_part, self.else_part = cond, then_part, else_part
	def __repr__(self):
		if self.else_part is None: return "(if %r ? %r)"%(self.cond, self.then_part)
		return "(if %r ? %r : %r)"%(self.cond, self.then_part, self.else_part)

class Sequence(Expression):
	def __init__(self, head:Token, statements:Iterable[Expression]):
		self.head = head
		self.statements = tuple(statements)
	def __repr__(self): return "; ".join(map(repr, self.statements))

class FunctionDef(Expression):
	def __init__(self, head:Token, name:str, params:Iterable[str], body:"Sequence"):
		self.head, self.name = head, name
		self.params = tuple(params)
		self.body = body
	def signature(self): return "%s(%s)"%(self.name, ", ".join(self.params))
	def __repr__(self): return "(def %s)"%self.signature()

class FunctionCall(Expression):
	def __init__(self, head:Token, name:str, args:Iterable[Expression]):
		self.head, self.name = head, name
		self.args = tuple(args)
	def __repr__(self): return "(call %s %s)"%(self.name, " ".join(map(repr, self.args)))

class SpecialCall(Expression):
	""" print and xprint: evaluate, show, and pass the value along. """
	def __init__(self, head:Token, expr:Expression):
		self.head = head
		self.kind = head.lexeme
		self.expr = expr
	def __repr__(self): return "(%s %r)"%(self.kind, self.expr)
