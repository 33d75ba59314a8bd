"""Session control for arith language. Runs statements from a file, a single command, or the interactive shell against
one shared Environment.
"""

import logging

from arith.lang.error import GenericException
from arith.lang.lexical import Stmt
from arith.pure.environment import Environment


logger = logging.getLogger(__name__)


class Session:
    """Governs an arith session, with control over the scope of variables."""
    SH_FILE = "<in>"    # command-line interpreter filename
    CMD_FILE = "<cmd>"  # filename for a single statement passed on the command line

    def __init__(self, error_handler, path, cmd_line=False, environment=None):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode

        self.environment = environment if environment is not None else Environment()
        self.to_exec = {}  # dict of line num: Stmts to execute

        if self.cmd_line:
            self.error_handler.fatal = False

        if path not in (Session.SH_FILE, Session.CMD_FILE):
            exprs = []
            add_to_prev = False

            try:
                with open(path, "r") as file:
                    for line_num, line in enumerate(file):
                        __, add_to_prev = self.preprocess_line(line, line_num + 1, add_to_prev, exprs)
            except OSError:
                raise GenericException("'{}' could not be opened", path, diagnosis=False)

            for expr in exprs:
                self.add(*expr)

        elif path == Session.SH_FILE and not cmd_line:
            raise GenericException("'<in>' is a reserved filename", diagnosis=False)

    @staticmethod
    def preprocess_line(line, line_num, add_to_prev, exprs=None):
        """Preprocesses a line from a file or command-line. In command-line mode, exprs can be ignored (used to keep
        track of file's exprs), but add_to_prev will indicate whether a line continuation is necessary. Returns
        updated value of line and add_to_prev. Must be called before calling add.
        """
        if ";;" in line:
            line = line[:line.index(";;")]  # get rid of comments

        line = Stmt.preprocess(line)
        if exprs is not None:
            if line and not line.isspace() and not add_to_prev:
                exprs.append((line, line_num))
            elif add_to_prev:
                prev, prev_line_num = exprs.pop()
                line = prev + " " + line
                exprs.append((line, prev_line_num))

        return line, line.count("(") > line.count(")")

    def add(self, expr, line_num):
        """Adds Stmt to the current session. Evaluation is delayed until run is called."""
        self.error_handler.register_line(self.path, Stmt.preprocess(expr), line_num)  # in case error is raised

        self.to_exec[line_num] = Stmt.infer(expr)

        self.error_handler.remove_line(self.path)  # error was not raised

    def run(self):
        """Runs this session's statements in line order, yielding the value of each. Will raise the first error that
        is encountered, and no later statement is run.
        """
        for line_num, stmt in sorted(self.to_exec.items()):
            self.error_handler.register_line(self.path, str(stmt), line_num)

            try:
                value = stmt.execute(self.environment)
                logger.debug("%s:%s: %s -> %s", self.path, line_num, stmt.tree, value)
            finally:
                del self.to_exec[line_num]

            self.error_handler.remove_line(self.path)
            yield value
