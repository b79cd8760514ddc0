import sys

from rich.pretty import pprint

from argtree import *
from argtree.validation import email_address

app = Command("mailer", "Argtree Mailer", "Send mail from the command line", response_files=True)
app.help_option("-?|-h|--help", inherited=True)
app.version_option("--version", "1.0.0", "1.0.0 (argtree example)")
verbose = app.option("-v|--verbose", "Show what is going on", OptionType.NO_VALUE, inherited=True)


def configure(send):
    to = send.option("-t|--to <ADDRESS>", "Recipient", OptionType.MULTIPLE_VALUE)
    to.is_required().accepts(email_address())
    subject = send.option("-s|--subject <TEXT>", "Subject line")
    body = send.argument("body", "Message words", variadic=True)

    @send.on_execute
    def run():
        if verbose.has_value():
            pprint(send)
        send.out.print(f"to={to.values} subject={subject.value!r} body={' '.join(body.values)!r}")
        return 0


app.command("send", configure, descr="Send a message")


@app.on_execute
def usage():
    app.show_help()
    return 1


if __name__ == '__main__':
    sys.exit(invoke(app))
