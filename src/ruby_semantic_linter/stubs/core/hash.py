"""Hash."""


def load(root):
    klass = root.define_constant("Hash").inherits("Object")

    klass.define_method("new").define_argument("*args")

    klass.define_instance_method("==").define_argument("other")
    klass.define_instance_method("[]").define_argument("key")
    klass.define_instance_method("[]=").define_argument("key").define_argument("value")
    klass.define_instance_method("fetch").define_argument("key").define_argument("*args")
    klass.define_instance_method("key?").define_argument("key")
    klass.define_instance_method("merge").define_argument("*others")
    klass.define_instance_method("delete").define_argument("key")

    for name in ("each", "each_pair", "empty?", "keys", "length", "map", "select", "size", "to_a", "values"):
        klass.define_instance_method(name)
