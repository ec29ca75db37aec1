"""Numeric: shared base of Integer and Float."""


def load(root):
    klass = root.define_constant("Numeric").inherits("Object")

    for operator in ("+", "-", "*", "/", "%", "**", "<=>", "coerce"):
        klass.define_instance_method(operator).define_argument("other")

    for name in ("abs", "ceil", "floor", "round", "integer?", "zero?", "positive?", "negative?", "to_i", "to_f"):
        klass.define_instance_method(name)

    klass.define_instance_method("step").define_argument("*args")
