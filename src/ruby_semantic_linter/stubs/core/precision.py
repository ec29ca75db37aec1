"""Precision: numeric conversion mixin."""


def load(root):
    mod = root.define_module("Precision")

    mod.define_method("__module_init__")
    mod.define_method("included").define_argument("klass")

    mod.define_instance_method("prec").define_argument("klass")
    mod.define_instance_method("prec_f")
    mod.define_instance_method("prec_i")
