from .arguments import parse_options


class SolverConfig:
    """Settings that apply to every solve they are passed to.

    .. code-block::

        # stop every solve after 60 seconds, unless a call overrides it
        config = SolverConfig(options={"sec": 60}, print_output=True)
        result = cbc_solve(obj, A, row_ub, config=config, cbc_args={"sec": 10})
    """
    def __init__(self, options=None, print_output=False, keep_files=False):
        """
        :param options: default CBC options. They are placed before the options of each
            solve call, so that the latter override them. See `arguments.parse_options`.
        :type options: Union[Dict[str,object], Iterable], optional
        :param print_output: whether CBC's console output is shown, defaults to False
        :type print_output: bool, optional
        :param keep_files: whether the MPS and solution files written for CBC are kept
            after solving, defaults to False
        :type keep_files: bool, optional
        """
        self.options = parse_options(options)
        self.print_output = print_output
        self.keep_files = keep_files

    def merge(self, cbc_args):
        """Returns the default options followed by `cbc_args`.

        :rtype: Tuple[Union[arguments.Flag,arguments.NamedValue]]
        """
        return self.options + parse_options(cbc_args)

    def __repr__(self):
        return "SolverConfig(options=%s, print_output=%s, keep_files=%s)" % (
            list(self.options), self.print_output, self.keep_files)
