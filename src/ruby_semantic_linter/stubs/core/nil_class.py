def load(root):
    klass = root.define_constant("NilClass").inherits("Object")

    for name in ("to_a", "to_s", "to_i", "to_f", "inspect", "nil?"):
        klass.define_instance_method(name)

    klass.define_instance_method("&").define_argument("other")
    klass.define_instance_method("|").define_argument("other")
