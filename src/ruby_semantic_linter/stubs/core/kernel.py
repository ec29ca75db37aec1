"""Kernel: functions available without a receiver."""


def load(root):
    mod = root.define_module("Kernel")

    for name in ("puts", "print", "p", "pp", "warn"):
        mod.define_instance_method(name).define_argument("*args")

    mod.define_instance_method("require").define_argument("name")
    mod.define_instance_method("require_relative").define_argument("name")
    mod.define_instance_method("raise").define_argument("*args")
    mod.define_instance_method("fail").define_argument("*args")
    mod.define_instance_method("loop")
    mod.define_instance_method("lambda")
    mod.define_instance_method("proc")
    mod.define_instance_method("block_given?")
    mod.define_instance_method("format").define_argument("format").define_argument("*args")
    mod.define_instance_method("sprintf").define_argument("format").define_argument("*args")
    mod.define_instance_method("Integer").define_argument("value")
    mod.define_instance_method("Float").define_argument("value")
    mod.define_instance_method("String").define_argument("value")
    mod.define_instance_method("Array").define_argument("value")
    mod.define_instance_method("catch").define_argument("tag")
    mod.define_instance_method("throw").define_argument("tag").define_argument("*args")
    mod.define_instance_method("sleep").define_argument("duration")
