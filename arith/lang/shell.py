"""Handles interactive/command-line mode for arith interpreter. Uses cmd as backend."""

import cmd

from arith.lang.numerical import number


class Shell(cmd.Cmd):
    """Arithmetic interpreter shell."""
    intro = "Arithmetic interpreter :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "
    secondary_prompt = ". "  # used for line continuations
    _tmp_prompt = "> "       # also used for prompt swapping in line continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess

        self._tmp_line = ""
        self.line_num = 0

    def default(self, line):
        """Executes arbitrary arith statement."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            line = f"{self._tmp_line} {line}".lstrip()
            line, add_to_prev = self.sess.preprocess_line(line, self.line_num, self._tmp_line)

            if add_to_prev:
                self._tmp_line = line
                self.prompt = self.secondary_prompt
            else:
                self._tmp_line = ""
                self.prompt = self._tmp_prompt

                if not line:
                    return  # if line is empty (or only a comment), terminate

                self.sess.add(line, self.line_num)
                for value in self.sess.run():
                    print(number(value), file=self.stdout)

    def do_vars(self, arg):
        """Lists variables bound in this session."""
        if arg:
            return self.default(f"vars {arg}")  # "vars" used as a variable name

        for name in sorted(self.sess.environment):
            print(f"{name} = {number(self.sess.environment.get(name))}", file=self.stdout)

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        if arg:
            return self.default(f"help {arg}")

        print("Welcome to the arith interpreter!\n\n"
              "Type an arithmetic expression with its tokens separated by spaces, such as \n"
              "'( 2 + 3 ) * 4', and its value will be printed. Supported operators are \n"
              "'+', '-', '*' and '/', with the usual precedence.\n\n"
              "Try typing 'x = 2 * 3'. This will bind 6 to the name 'x'. Next, try typing \n"
              "'x / 4', giving 1.5 as the result. 'vars' lists every bound name.", file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        if arg:
            return self.default(f"EOF {arg}")

        print(file=self.stdout)
        return True

    def do_exit(self, arg):
        """Exits interpreter."""
        if arg:
            return self.default(f"exit {arg}")
        return True
