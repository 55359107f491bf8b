"""Solvers for algorithmic contest problems, one module per problem."""