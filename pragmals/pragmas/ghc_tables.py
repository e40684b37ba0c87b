"""
Built-in GHC tables.

Snapshot of the language extensions (``xFlags``) and the completable
command line options of GHC 9.4. Used whenever no ``ghc`` executable is
configured or it cannot be queried.
"""

# Reversible extensions: each one also exists as a ``No`` variant.
EXTENSIONS: tuple[str, ...] = (
    "AllowAmbiguousTypes",
    "AlternativeLayoutRule",
    "AlternativeLayoutRuleTransitional",
    "ApplicativeDo",
    "Arrows",
    "AutoDeriveTypeable",
    "BangPatterns",
    "BinaryLiterals",
    "BlockArguments",
    "CApiFFI",
    "CPP",
    "CUSKs",
    "ConstrainedClassMethods",
    "ConstraintKinds",
    "DataKinds",
    "DatatypeContexts",
    "DeepSubsumption",
    "DefaultSignatures",
    "DeriveAnyClass",
    "DeriveDataTypeable",
    "DeriveFoldable",
    "DeriveFunctor",
    "DeriveGeneric",
    "DeriveLift",
    "DeriveTraversable",
    "DerivingStrategies",
    "DerivingVia",
    "DisambiguateRecordFields",
    "DoAndIfThenElse",
    "DoRec",
    "DuplicateRecordFields",
    "EmptyCase",
    "EmptyDataDecls",
    "EmptyDataDeriving",
    "ExistentialQuantification",
    "ExplicitForAll",
    "ExplicitNamespaces",
    "ExtendedDefaultRules",
    "FieldSelectors",
    "FlexibleContexts",
    "FlexibleInstances",
    "ForeignFunctionInterface",
    "FunctionalDependencies",
    "GADTSyntax",
    "GADTs",
    "GHCForeignImportPrim",
    "GeneralisedNewtypeDeriving",
    "GeneralizedNewtypeDeriving",
    "HexFloatLiterals",
    "ImplicitParams",
    "ImplicitPrelude",
    "ImportQualifiedPost",
    "ImpredicativeTypes",
    "IncoherentInstances",
    "InstanceSigs",
    "InterruptibleFFI",
    "KindSignatures",
    "LambdaCase",
    "LexicalNegation",
    "LiberalTypeSynonyms",
    "LinearTypes",
    "MagicHash",
    "MonadComprehensions",
    "MonoLocalBinds",
    "MonomorphismRestriction",
    "MultiParamTypeClasses",
    "MultiWayIf",
    "NPlusKPatterns",
    "NamedFieldPuns",
    "NamedWildCards",
    "NegativeLiterals",
    "NondecreasingIndentation",
    "NullaryTypeClasses",
    "NumDecimals",
    "NumericUnderscores",
    "OverlappingInstances",
    "OverloadedLabels",
    "OverloadedLists",
    "OverloadedRecordDot",
    "OverloadedRecordUpdate",
    "OverloadedStrings",
    "PackageImports",
    "ParallelArrays",
    "ParallelListComp",
    "PartialTypeSignatures",
    "PatternGuards",
    "PatternSignatures",
    "PatternSynonyms",
    "PolyKinds",
    "PolymorphicComponents",
    "PostfixOperators",
    "QualifiedDo",
    "QuantifiedConstraints",
    "QuasiQuotes",
    "Rank2Types",
    "RankNTypes",
    "RebindableSyntax",
    "RecordPuns",
    "RecordWildCards",
    "RecursiveDo",
    "RelaxedLayout",
    "RelaxedPolyRec",
    "RoleAnnotations",
    "ScopedTypeVariables",
    "StandaloneDeriving",
    "StandaloneKindSignatures",
    "StarIsType",
    "StaticPointers",
    "Strict",
    "StrictData",
    "TemplateHaskell",
    "TemplateHaskellQuotes",
    "TraditionalRecordSyntax",
    "TransformListComp",
    "TupleSections",
    "TypeApplications",
    "TypeFamilies",
    "TypeFamilyDependencies",
    "TypeInType",
    "TypeOperators",
    "TypeSynonymInstances",
    "UnboxedSums",
    "UnboxedTuples",
    "UndecidableInstances",
    "UndecidableSuperClasses",
    "UnicodeSyntax",
    "UnliftedDatatypes",
    "UnliftedFFITypes",
    "UnliftedNewtypes",
    "ViewPatterns",
)

# Pragmas that are not part of the reversible extensions since they
# cannot be negated by prefixing them with "No".
NON_REVERSIBLE_PRAGMAS: tuple[str, ...] = (
    # Safe Haskell
    "Unsafe",
    "Trustworthy",
    "Safe",
    # Language editions
    "Haskell98",
    "Haskell2010",
)

WARNINGS: tuple[str, ...] = (
    "all-missed-specialisations",
    "ambiguous-fields",
    "auto-orphans",
    "compat-unqualified-imports",
    "cpp-undef",
    "deferred-out-of-scope-variables",
    "deferred-type-errors",
    "deprecated-flags",
    "deprecations",
    "deriving-defaults",
    "deriving-typeable",
    "dodgy-exports",
    "dodgy-foreign-imports",
    "dodgy-imports",
    "duplicate-constraints",
    "duplicate-exports",
    "empty-enumerations",
    "forall-identifier",
    "gadt-mono-local-binds",
    "identities",
    "implicit-kind-vars",
    "implicit-lift",
    "implicit-prelude",
    "inaccessible-code",
    "incomplete-patterns",
    "incomplete-record-updates",
    "incomplete-uni-patterns",
    "inline-rule-shadowing",
    "invalid-haddock",
    "missed-extra-shared-lib",
    "missed-specialisations",
    "missing-deriving-strategies",
    "missing-export-lists",
    "missing-exported-signatures",
    "missing-fields",
    "missing-home-modules",
    "missing-import-lists",
    "missing-kind-signatures",
    "missing-local-signatures",
    "missing-methods",
    "missing-monadfail-instances",
    "missing-pattern-synonym-signatures",
    "missing-safe-haskell-mode",
    "missing-signatures",
    "monomorphism-restriction",
    "name-shadowing",
    "noncanonical-monad-instances",
    "noncanonical-monoid-instances",
    "operator-whitespace",
    "operator-whitespace-ext-conflict",
    "orphans",
    "overflowed-literals",
    "overlapping-patterns",
    "partial-fields",
    "partial-type-signatures",
    "prepositive-qualified-module",
    "redundant-bang-patterns",
    "redundant-constraints",
    "redundant-record-wildcards",
    "redundant-strictness-flags",
    "safe",
    "semigroup",
    "simplifiable-class-constraints",
    "star-binder",
    "star-is-type",
    "tabs",
    "trustworthy-safe",
    "type-defaults",
    "type-equality-out-of-scope",
    "type-equality-requires-operators",
    "typed-holes",
    "unbanged-strict-patterns",
    "unicode-bidirectional-format-characters",
    "unrecognised-pragmas",
    "unrecognised-warning-flags",
    "unsafe",
    "unsupported-calling-conventions",
    "unsupported-llvm-version",
    "unticked-promoted-constructors",
    "unused-binds",
    "unused-do-bind",
    "unused-foralls",
    "unused-imports",
    "unused-local-binds",
    "unused-matches",
    "unused-packages",
    "unused-pattern-binds",
    "unused-record-wildcards",
    "unused-top-binds",
    "unused-type-patterns",
    "warnings-deprecations",
    "wrong-do-bind",
)

# Options completed besides the -W / -Wno- warning switches.
OPTIONS: tuple[str, ...] = (
    "-Wall",
    "-Wcompat",
    "-Wdefault",
    "-Werror",
    "-Weverything",
    "-Wextra",
    "-fdefer-type-errors",
    "-fdefer-typed-holes",
    "-fexpose-all-unfoldings",
    "-fforce-recomp",
    "-fno-code",
    "-fno-warn-orphans",
    "-fplugin",
    "-fprint-explicit-foralls",
    "-fprint-explicit-kinds",
    "-fprint-potential-instances",
    "-fspecialise-aggressively",
    "-fwarn-incomplete-patterns",
    "-O0",
    "-O1",
    "-O2",
    "-Werror=incomplete-patterns",
    "-haddock",
    "-threaded",
)


def default_flags() -> tuple[str, ...]:
    """All completable option names, leading dash included."""
    flags: list[str] = []
    for warning in WARNINGS:
        flags.append(f"-W{warning}")
        flags.append(f"-Wno-{warning}")
    flags.extend(option for option in OPTIONS if option not in flags)
    return tuple(flags)
