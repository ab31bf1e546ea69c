"""Tier definitions: which constant names exist on which platform family.

This module only lists *names*.  Numeric values always come from a
:class:`~platconst.core.protocols.ValueSource`, so nothing here can drift
from the headers of the platform the table is built for.

Tiers
-----
* ``common-errno``   POSIX error numbers defined everywhere.
* ``linux-errno``    STREAMS, networking and key-management errors.
* ``darwin-errno``   RPC, Mach-O and device errors.
* ``common-socket``  address families, socket types, options and flags.
* ``linux-socket``   Linux-only socket levels and options.
"""

from __future__ import annotations

from platconst.core.models import (
    ConstantCategory,
    ExcludedConstant,
    PlatformFamily,
    Tier,
)


# ---------------------------------------------------------------------------
# Error numbers
# ---------------------------------------------------------------------------

COMMON_ERRNO = Tier(
    name="common-errno",
    family=None,
    category=ConstantCategory.ERRNO,
    names=(
        "EPERM",
        "ENOENT",
        "ESRCH",
        "EINTR",
        "EIO",
        "ENXIO",
        "E2BIG",
        "ENOEXEC",
        "EBADF",
        "ECHILD",
        "EAGAIN",
        "ENOMEM",
        "EACCES",
        "EFAULT",
        "ENOTBLK",
        "EBUSY",
        "EEXIST",
        "EXDEV",
        "ENODEV",
        "ENOTDIR",
        "EISDIR",
        "EINVAL",
        "ENFILE",
        "EMFILE",
        "ENOTTY",
        "ETXTBSY",
        "EFBIG",
        "ENOSPC",
        "ESPIPE",
        "EROFS",
        "EMLINK",
        "EPIPE",
        "EDOM",
        "ERANGE",
        "EDEADLK",
        "ENAMETOOLONG",
        "ENOLCK",
        "ENOSYS",
        "ENOTEMPTY",
        "ELOOP",
        "ENOMSG",
        "EIDRM",
        "EINPROGRESS",
        "EALREADY",
        "ENOTSOCK",
        "EDESTADDRREQ",
        "EMSGSIZE",
        "EPROTOTYPE",
        "ENOPROTOOPT",
        "EPROTONOSUPPORT",
        "ESOCKTNOSUPPORT",
        "EPFNOSUPPORT",
        "EAFNOSUPPORT",
        "EADDRINUSE",
        "EADDRNOTAVAIL",
        "ENETDOWN",
        "ENETUNREACH",
        "ENETRESET",
        "ECONNABORTED",
        "ECONNRESET",
        "ENOBUFS",
        "EISCONN",
        "ENOTCONN",
        "ESHUTDOWN",
        "ETOOMANYREFS",
        "ETIMEDOUT",
        "ECONNREFUSED",
        "EHOSTDOWN",
        "EHOSTUNREACH",
    ),
)

LINUX_ERRNO = Tier(
    name="linux-errno",
    family=PlatformFamily.LINUX,
    category=ConstantCategory.ERRNO,
    names=(
        "ECHRNG",
        "EL2NSYNC",
        "EL3HLT",
        "EL3RST",
        "ELNRNG",
        "EUNATCH",
        "ENOCSI",
        "EL2HLT",
        "EBADE",
        "EBADR",
        "EXFULL",
        "ENOANO",
        "EBADRQC",
        "EBADSLT",
        "EBFONT",
        "ENOSTR",
        "ENODATA",
        "ETIME",
        "ENOSR",
        "ENONET",
        "ENOPKG",
        "EREMOTE",
        "ENOLINK",
        "EADV",
        "ESRMNT",
        "ECOMM",
        "EPROTO",
        "EMULTIHOP",
        "EDOTDOT",
        "EBADMSG",
        "EOVERFLOW",
        "ENOTUNIQ",
        "EBADFD",
        "EREMCHG",
        "ELIBACC",
        "ELIBBAD",
        "ELIBSCN",
        "ELIBMAX",
        "ELIBEXEC",
        "EILSEQ",
        "ERESTART",
        "ESTRPIPE",
        "EUSERS",
        "EOPNOTSUPP",
        "ESTALE",
        "EUCLEAN",
        "ENOTNAM",
        "ENAVAIL",
        "EISNAM",
        "EREMOTEIO",
        "EDQUOT",
        "ENOMEDIUM",
        "EMEDIUMTYPE",
        "ECANCELED",
        "ENOKEY",
        "EKEYEXPIRED",
        "EKEYREVOKED",
        "EKEYREJECTED",
        "EOWNERDEAD",
        "ENOTRECOVERABLE",
        "ERFKILL",
    ),
)

DARWIN_ERRNO = Tier(
    name="darwin-errno",
    family=PlatformFamily.DARWIN,
    category=ConstantCategory.ERRNO,
    names=(
        "ENOTSUP",
        "EPROCLIM",
        "EUSERS",
        "EDQUOT",
        "ESTALE",
        "EREMOTE",
        "EBADRPC",
        "ERPCMISMATCH",
        "EPROGUNAVAIL",
        "EPROGMISMATCH",
        "EPROCUNAVAIL",
        "EFTYPE",
        "EAUTH",
        "ENEEDAUTH",
        "EPWROFF",
        "EDEVERR",
        "EOVERFLOW",
        "EBADEXEC",
        "EBADARCH",
        "ESHLIBVERS",
        "EBADMACHO",
        "ECANCELED",
        "EILSEQ",
        "ENOATTR",
        "EBADMSG",
        "EMULTIHOP",
        "ENODATA",
        "ENOLINK",
        "ENOSR",
        "ENOSTR",
        "EPROTO",
        "ETIME",
        "EOPNOTSUPP",
        "ENOPOLICY",
        "ENOTRECOVERABLE",
        "EOWNERDEAD",
        "EQFULL",
    ),
)


# ---------------------------------------------------------------------------
# Socket API
# ---------------------------------------------------------------------------

COMMON_SOCKET = Tier(
    name="common-socket",
    family=None,
    category=ConstantCategory.SOCKET,
    names=(
        # address families
        "AF_UNIX",
        "AF_LOCAL",
        "AF_INET",
        "AF_INET6",
        # socket types
        "SOCK_STREAM",
        "SOCK_DGRAM",
        "SOCK_SEQPACKET",
        "SOCK_RAW",
        "SOCK_RDM",
        # levels and protocols
        "SOL_SOCKET",
        "IPPROTO_IP",
        "IPPROTO_IPV6",
        "IPPROTO_TCP",
        "IPPROTO_UDP",
        # SOL_SOCKET options
        "SO_ACCEPTCONN",
        "SO_BROADCAST",
        "SO_DEBUG",
        "SO_ERROR",
        "SO_DONTROUTE",
        "SO_KEEPALIVE",
        "SO_LINGER",
        "SO_OOBINLINE",
        "SO_RCVBUF",
        "SO_RCVLOWAT",
        "SO_SNDLOWAT",
        "SO_RCVTIMEO",
        "SO_SNDTIMEO",
        "SO_REUSEADDR",
        "SO_SNDBUF",
        "SO_TIMESTAMP",
        "SO_TYPE",
        # IPPROTO_TCP options
        "TCP_NODELAY",
        "TCP_MAXSEG",
        # IPPROTO_IP multicast
        "IP_MULTICAST_IF",
        "IP_MULTICAST_TTL",
        "IP_MULTICAST_LOOP",
        "IP_ADD_MEMBERSHIP",
        "IP_DROP_MEMBERSHIP",
        # well-known addresses
        "INADDR_ANY",
        "INADDR_NONE",
        "INADDR_BROADCAST",
        # message flags
        "MSG_OOB",
        "MSG_PEEK",
        "MSG_DONTWAIT",
        # shutdown modes
        "SHUT_RD",
        "SHUT_WR",
        "SHUT_RDWR",
    ),
)

LINUX_SOCKET = Tier(
    name="linux-socket",
    family=PlatformFamily.LINUX,
    category=ConstantCategory.SOCKET,
    names=(
        "SOL_IP",
        "SOL_TCP",
        "SOL_IPV6",
        "SOL_UDP",
        "SO_BINDTODEVICE",
        "SO_BSDCOMPAT",
        "TCP_CORK",
        "SO_PASSCRED",
        "SO_PRIORITY",
        "SO_RCVBUFFORCE",
        "SO_PEERCRED",
        "SO_SNDBUFFORCE",
    ),
)


ALL_TIERS: tuple[Tier, ...] = (
    COMMON_ERRNO,
    LINUX_ERRNO,
    DARWIN_ERRNO,
    COMMON_SOCKET,
    LINUX_SOCKET,
)
"""Every tier, common tiers ahead of the family tiers of each category."""


# ---------------------------------------------------------------------------
# Known gaps
# ---------------------------------------------------------------------------

KNOWN_GAPS: tuple[ExcludedConstant, ...] = (
    ExcludedConstant(
        name="SO_REUSEPORT",
        families=(PlatformFamily.LINUX, PlatformFamily.DARWIN),
        reason="semantics differ between Linux and BSD load balancing",
    ),
    ExcludedConstant(
        name="EHWPOISON",
        families=(PlatformFamily.LINUX,),
        reason="missing from older kernel and libc headers",
    ),
    ExcludedConstant(
        name="SO_DOMAIN",
        families=(PlatformFamily.LINUX,),
        reason="kernel-version-dependent socket option",
    ),
    ExcludedConstant(
        name="SO_MARK",
        families=(PlatformFamily.LINUX,),
        reason="kernel-version-dependent socket option",
    ),
    ExcludedConstant(
        name="SO_BUSY_POLL",
        families=(PlatformFamily.LINUX,),
        reason="kernel-version-dependent socket option",
    ),
    ExcludedConstant(
        name="SO_RXQ_OVFL",
        families=(PlatformFamily.LINUX,),
        reason="kernel-version-dependent socket option",
    ),
    ExcludedConstant(
        name="SO_PROTOCOL",
        families=(PlatformFamily.LINUX,),
        reason="kernel-version-dependent socket option",
    ),
    ExcludedConstant(
        name="SO_PEEK_OFF",
        families=(PlatformFamily.LINUX,),
        reason="kernel-version-dependent socket option",
    ),
)


def tiers_for(family: PlatformFamily) -> tuple[Tier, ...]:
    """Return the tiers visible when *family* is active, in lookup order."""
    return tuple(tier for tier in ALL_TIERS if tier.applies_to(family))


def known_gap(name: str) -> ExcludedConstant | None:
    """Return the exclusion record for *name*, if it is a known gap."""
    for gap in KNOWN_GAPS:
        if gap.name == name:
            return gap
    return None
