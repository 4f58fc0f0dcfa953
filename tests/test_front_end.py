import unittest

from pcalc.front_end import parse_text, Parser
from pcalc.scanner import scan
from pcalc import syntax
from pcalc.errors import PcalcSyntaxError, IncompleteInput, RedefinitionError

def _one(text) -> syntax.Expression:
	program = parse_text(text)
	assert len(program.statements) == 1, program
	return program.statements[0]

class PrefixStructure(unittest.TestCase):
	
	def test_operators_consume_their_arity(self):
		self.assertEqual("(* 2 (+ <ref:x> 20))", repr(_one("* 2 + x 20")))
		self.assertEqual("(sqrt (+ (^ 3 2) (^ 4 2)))", repr(_one("sqrt + ^ 3 2 ^ 4 2")))
		self.assertEqual("(and (asbool 5) true)", repr(_one("and asbool 5 true")))
	
	def test_constants_are_recognized(self):
		node = _one("pi")
		self.assertIsInstance(node, syntax.ConstantRef)
		self.assertIsInstance(_one("last"), syntax.VariableRef)
	
	def test_var_and_assign(self):
		node = _one("var x + 1 2")
		self.assertIsInstance(node, syntax.VarDefine)
		self.assertEqual("x", node.name)
		node = _one("= x 5")
		self.assertIsInstance(node, syntax.Assign)
	
	def test_conditional(self):
		node = _one("if > x 10 ? x fi")
		self.assertIsInstance(node, syntax.Conditional)
		self.assertIsNone(node.else_part)
		node = _one("if <= x 5 ? = x + x 1 : = y + y 1 fi")
		self.assertIsInstance(node.else_part, syntax.Assign)
	
	def test_function_definition(self):
		node = _one("def f2c f begin / * - f 32 5 9 end")
		self.assertIsInstance(node, syntax.FunctionDef)
		self.assertEqual(("f",), node.params)
		self.assertEqual(1, len(node.body.statements))
	
	def test_semicolons_in_a_body_are_optional(self):
		bare = _one("def dist x1 y1 x2 y2 begin var dx2 ^ - x2 x1 2 var dy2 ^ - y2 y1 2 sqrt + dx2 dy2 end")
		punctuated = _one("def dist x1 y1 x2 y2\nbegin\nvar dx2 ^ - x2 x1 2;\nvar dy2 ^ - y2 y1 2;\nsqrt + dx2 dy2\nend")
		self.assertEqual(("x1", "y1", "x2", "y2"), bare.params)
		self.assertEqual(3, len(bare.body.statements))
		self.assertEqual(repr(bare.body), repr(punctuated.body))
	
	def test_function_call(self):
		node = _one("call dist 3 4 6 8 cend")
		self.assertIsInstance(node, syntax.FunctionCall)
		self.assertEqual(4, len(node.args))
		self.assertEqual(0, len(_one("call nothing cend").args))
	
	def test_print(self):
		node = _one("xprint + 1 2")
		self.assertIsInstance(node, syntax.SpecialCall)
		self.assertEqual("xprint", node.kind)
	
	def test_statements(self):
		self.assertEqual(3, len(parse_text("var x 1; var y 2 ; + x y").statements))
		self.assertEqual(1, len(parse_text(";; + 1 2 ;").statements))
		self.assertEqual(0, len(parse_text("").statements))
	
	def test_statements_come_one_at_a_time(self):
		each = Parser(scan("1; 2 3")).each_statement()
		self.assertIsInstance(next(each), syntax.NumberLiteral)
		self.assertRaises(PcalcSyntaxError, next, each)

class ParseErrors(unittest.TestCase):
	
	def test_incomplete(self):
		for text in ["+", "+ 1", "var", "var bad", "sqrt", "if true ? 1", "if true", "def f x", "def f x begin x", "call f 1 2"]:
			with self.subTest(text):
				self.assertRaises(IncompleteInput, parse_text, text)
	
	def test_syntax(self):
		for text in ["1 2", "fi", "end", "cend", "begin", "?", "var 5 3", "if true 1 fi", "if true ? 1 2 fi", "call 5 cend", "+ 1 ;"]:
			with self.subTest(text):
				with self.assertRaises(PcalcSyntaxError) as cm:
					parse_text(text)
				self.assertNotIsInstance(cm.exception, IncompleteInput)
	
	def test_reserved_names(self):
		for text in ["var pi 3", "var e 1", "var sqrt 5", "var true 5", "= last 1", "= tau 1", "def sqrt x begin ^ x 0.5 end", "def f pi begin 1 end", "def f x x begin x end"]:
			with self.subTest(text):
				self.assertRaises(RedefinitionError, parse_text, text)
	
	def test_error_points_at_token(self):
		with self.assertRaises(PcalcSyntaxError) as cm:
			parse_text("+ 1 2 3")
		self.assertEqual(6, cm.exception.offset)
		self.assertEqual("3", cm.exception.subject)

if __name__ == '__main__':
	unittest.main()
