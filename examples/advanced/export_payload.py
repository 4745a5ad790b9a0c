"""Hand a scaled fixed-layout tree to a page writer as JSON."""

from mdexport import Converter, ParseConfig

convert = Converter(config=ParseConfig(trailing_spacer=True), scale=0.75)

payload = convert.to_json("# Report\n\n1. first\n1. second\n\n", indent=2)
print(payload[:400])
print("JSON length:", len(payload), "chars")
