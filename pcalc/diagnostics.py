"""
Collecting and explaining problems.

A Report gathers issues as statements fail, and can show them with the
offending token underlined in context. Verbose mode also narrates each
statement as it runs, to stderr, so that stdout carries only program output.
"""
import sys
from typing import Optional
from boozetools.support.failureprone import SourceText, illustration
from .errors import PcalcError

class TooManyIssues(Exception):
	pass

class Report:
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0, max_issues:Optional[int]=None):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	@property
	def issues(self): return tuple(self._issues)

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	def issue(self, it:"Pic"):
		self._issues.append(it)
		if self._max_issues is not None and len(self._issues) >= self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def trace(self, text:str, offset:int, width:int, caption:str):
		""" Narrate one step of the run, in verbose mode only. """
		if self._verbose:
			self.info(Annotation(text, offset, width, caption).illustrate())

	def statement_failed(self, text:str, error:PcalcError):
		intro = str(error)
		problem = [] if error.offset is None else [Annotation(text, error.offset, error.width, error.kind)]
		footer = ["    in "+crumb for crumb in error.trail]
		if error.elided:
			footer.append("    ... and %d more calls"%error.elided)
		self.issue(Pic(intro, problem, footer))

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def assert_no_issues(self, message):
		if self._issues:
			self.complain_to_console()
			raise AssertionError(message)

class Annotation:
	""" Points at a stretch of one statement's text. """
	def __init__(self, text:str, offset:int, width:int, caption:str=""):
		self.text = text
		self.slice = slice(offset, offset+width)
		self.caption = caption

	def illustrate(self):
		source = SourceText(self.text)
		row, col = source.find_row_col(self.slice.start)
		single_line = source.line_of_text(row)
		width = max(self.slice.stop - self.slice.start, 1)
		return illustration(single_line, col, width, prefix='% 6d |' % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	def as_text(self):
		lines = [self._intro]
		lines.extend(ann.illustrate() for ann in self._anns)
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues):
	for i in issues:
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
