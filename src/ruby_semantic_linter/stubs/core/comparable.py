"""Comparable mixin."""


def load(root):
    mod = root.define_module("Comparable")

    for operator in ("<", "<=", "==", ">", ">="):
        mod.define_instance_method(operator).define_argument("other")

    mod.define_instance_method("between?").define_argument("min").define_argument("max")
    mod.define_instance_method("clamp").define_argument("min").define_argument("max")
