"""
The statement boundary: where a driver hands over text and gets back a value or an error.

Statements run one at a time, each parsed just before it runs. So when the
third statement on a line fails, the first two have already had their effect,
and the environment keeps it.
"""
from typing import Optional, Union
from .scanner import scan
from .front_end import Parser
from .evaluator import evaluate
from .environment import Environment
from .diagnostics import Report
from .values import Value
from .errors import PcalcError, StackOverflow

def evaluate_text(text:str, env:Environment, report:Report=None) -> Optional[Value]:
	"""
	Run every statement in the text. Answer the value of the last one,
	or None if there were no statements at all. Errors propagate.
	"""
	result = None
	running = None
	parser = Parser(scan(text))
	try:
		for running in parser.each_statement():
			if report is not None:
				report.trace(text, running.offset(), running.width(), repr(running))
			result = evaluate(running, env)
			env.last = result
			running = None
	except RecursionError:
		env.unwind()
		if running is None:
			token = parser.peek()
			ex = StackOverflow("Expression nests deeper than the host stack allows", token.lexeme, token.offset)
		else:
			ex = StackOverflow("Recursion went deeper than the host stack allows")
			ex.locate(running.offset(), running.width())
		raise ex from None
	return result

def run_statement(text:str, env:Environment, report:Report) -> Union[Value, PcalcError, None]:
	""" Like evaluate_text, except that an error is noted in the report and returned, not raised. """
	try:
		return evaluate_text(text, env, report)
	except PcalcError as ex:
		report.statement_failed(text, ex)
		return ex
