def load(root):
    klass = root.define_constant("TrueClass").inherits("Object")

    klass.define_instance_method("to_s")
    klass.define_instance_method("&").define_argument("other")
    klass.define_instance_method("|").define_argument("other")
    klass.define_instance_method("^").define_argument("other")
