from cmdtree import App, Coercion, Fixed
from cmdtree.console import console


def show(options, operands):
    for name, value in options.items():
        console.print(f"[bold]{name}[/]: {value!r}")
    for name, values in operands.items():
        console.print(f"[bold]{name}[/]: {values!r}")


def keep_max(value, current, default):
    number = int(value)
    return number if current is None else max(current, number)


app = App("accumulators", help="Shows the built-in coercions.", action=show)
app.add_option("verbose", "-v", Coercion.COUNT, help="Count occurrences.")
app.add_option("tag", "-t <tag>", Coercion.COLLECT, help="Collect values.")
app.add_option("define", "-D <key=value>", Coercion.KV, help="Build a mapping.")
app.add_option("only", "--only <a,b,c>", Coercion.LISTING, help="Split a list.")
app.add_option("ports", "--ports <low..high>", Coercion.RANGE, help="Expand a range.")
app.add_option("mode", "--fast", Fixed("fast"), help="Store a fixed value.")
app.add_option("peak", "--peak <n>", keep_max, help="Keep the largest value.")
app.add_operand("rest", "*", help="Anything else.")

if __name__ == "__main__":
    app.run()
