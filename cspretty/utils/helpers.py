from colorama import Fore, Style
from ptlibs import ptprinthelper


class Log:
    """
    Diagnostic messages of the tool. Rendered policies never go through this class, so
    `silent` only affects the errors around them. `color` follows the output color mode.
    """

    silent: bool = False
    color: bool = True

    @staticmethod
    def bullet(color: str, mark: str) -> str:
        if not Log.color:
            return mark + " "

        return color + mark + " " + Style.RESET_ALL

    @staticmethod
    def error(msg: str):
        ptprinthelper.ptprint(Log.bullet(Fore.LIGHTRED_EX, "[!]") + msg, condition=not Log.silent)
