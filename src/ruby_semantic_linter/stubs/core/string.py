"""String."""


def load(root):
    klass = root.define_constant("String").inherits("Object")

    klass.define_method("new").define_argument("*args")

    for operator in ("+", "*", "%", "<=>", "==", "=~", "<<"):
        klass.define_instance_method(operator).define_argument("other")

    for name in (
        "capitalize",
        "chars",
        "chomp",
        "downcase",
        "empty?",
        "length",
        "lines",
        "reverse",
        "size",
        "strip",
        "to_i",
        "to_f",
        "to_s",
        "to_sym",
        "upcase",
    ):
        klass.define_instance_method(name)

    klass.define_instance_method("include?").define_argument("other")
    klass.define_instance_method("start_with?").define_argument("*prefixes")
    klass.define_instance_method("end_with?").define_argument("*suffixes")
    klass.define_instance_method("split").define_argument("*args")
    klass.define_instance_method("gsub").define_argument("pattern").define_argument("*args")
    klass.define_instance_method("sub").define_argument("pattern").define_argument("*args")
    klass.define_instance_method("[]").define_argument("*args")
