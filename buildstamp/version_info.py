"""
Version information for buildstamp
Generated during build process by buildstamp.utils.generator
DO NOT EDIT IT DIRECTLY!
"""

__version__ = '1.0.0'
__build_type__ = 'UNKNOWN'
__build_timestamp__ = '2026-10-19 00:00:00 UTC'
__build_user__ = 'unknown'
__build_host__ = 'unknown'
__target_system__ = 'unknown'
__target_architecture__ = 'unknown'
__host_system__ = 'unknown'
__compiler_id__ = 'unknown'
__compiler_version__ = 'unknown'
__git_describe__ = 'no-git'
__commit_hash__ = 'unknown'

BUILD_INFO = {
    'version': __version__,
    'build_type': __build_type__,
    'build_timestamp': __build_timestamp__,
    'build_user': __build_user__,
    'build_host': __build_host__,
    'target_system': __target_system__,
    'target_architecture': __target_architecture__,
    'host_system': __host_system__,
    'compiler_id': __compiler_id__,
    'compiler_version': __compiler_version__,
    'git_describe': __git_describe__,
    'git_commit_hash': __commit_hash__,
}
