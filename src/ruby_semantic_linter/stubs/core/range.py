def load(root):
    klass = root.define_constant("Range").inherits("Object")

    klass.define_method("new").define_argument("first").define_argument("last").define_argument("exclude_end")

    klass.define_instance_method("==").define_argument("other")
    klass.define_instance_method("include?").define_argument("object")
    klass.define_instance_method("cover?").define_argument("object")

    for name in ("begin", "end", "each", "first", "last", "max", "min", "size", "step", "to_a"):
        klass.define_instance_method(name)
