"""
Backends for hypothesis tests.

Only a CPU reference backend exists; each test lives in its own private
module and cpu.CPUHypothesisBackend dispatches on design.test_type.
"""
