"""Array."""


def load(root):
    klass = root.define_constant("Array").inherits("Object")

    klass.define_method("new").define_argument("*args")

    for operator in ("+", "-", "*", "&", "|", "<=>", "==", "<<"):
        klass.define_instance_method(operator).define_argument("other")

    for name in ("compact", "empty?", "first", "flatten", "last", "length", "pop", "shift", "size", "sort", "uniq"):
        klass.define_instance_method(name)

    for name in ("each", "each_with_index", "map", "select", "reject", "find"):
        klass.define_instance_method(name)

    klass.define_instance_method("[]").define_argument("*args")
    klass.define_instance_method("[]=").define_argument("*args")
    klass.define_instance_method("include?").define_argument("object")
    klass.define_instance_method("push").define_argument("*objects")
    klass.define_instance_method("join").define_argument("separator")
