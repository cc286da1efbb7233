"""Solvers for classic contest problems built on the core library."""